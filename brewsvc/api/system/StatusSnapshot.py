"""Live service status DTO."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StatusSnapshot:
    """What the init daemon reported for one service at one moment."""

    pid: int | None = None
    """Process ID of the running service, or None if not reported."""

    exit_code: int | None = None
    """Last exit status, or None if the service never exited."""

    loaded: bool = False
    """Whether the init daemon knows about (has loaded) the service."""

    loaded_file: Path | None = None
    """Service definition file the init daemon loaded the service from."""
