"""Abstract base class for live service queries against an init daemon."""

from abc import ABC, abstractmethod
from pathlib import Path

from .StatusSnapshot import StatusSnapshot
from .System import System


class _AbstractImpl(ABC):
    """Abstract base class for init-system specific status queries.

    Implementations ask the init daemon about one service and report what it
    says. They never start, stop or install anything.
    """

    def __init__(self, system: System):
        self.system = system

    @abstractmethod
    def status(self, service_name: str) -> StatusSnapshot:
        """Query the init daemon for a service.

        Args:
            service_name: Label (launchd) or unit name (systemd) of the service

        Returns:
            StatusSnapshot; an empty (not loaded) snapshot if the daemon does not know the service

        Raises:
            OSError: If the query command cannot be run
        """
        pass

    def is_loaded(self, service_name: str) -> bool:
        return self.status(service_name).loaded

    def pid(self, service_name: str) -> int | None:
        return self.status(service_name).pid

    def exit_code(self, service_name: str) -> int | None:
        return self.status(service_name).exit_code

    def loaded_file(self, service_name: str) -> Path | None:
        return self.status(service_name).loaded_file
