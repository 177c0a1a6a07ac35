"""Service descriptor - every service-related fact about one formula."""

from pathlib import Path
from typing import Any, Literal

from ..formula.Formula import Formula
from ..formula.ServiceSpec import ServiceSpec
from ..system.InitSystem import InitSystem
from ..system.StatusSnapshot import StatusSnapshot
from ..system.System import System
from ..system._AbstractImpl import _AbstractImpl
from ..system.get_backend import get_backend
from .ServiceState import ServiceState


def _is_pid(pid: int | None) -> bool:
    return pid is not None and pid > 0


class ServiceDescriptor:
    """Wraps a formula and answers where its service file lives and what state it is in.

    The init system and privilege level are asked from the probe on every call,
    so one descriptor gives consistent answers for whatever the probe reports at
    that moment. The only cached value is the loaded ServiceSpec.

    Queries that do not apply (no init system, no declared service) return None
    or False instead of raising.
    """

    def __init__(self, formula: Formula, system: System | None = None, backend: _AbstractImpl | None = None):
        """Create a descriptor for a formula.

        Args:
            formula: Formula to describe
            system: Init system probe (defaults to probing this machine)
            backend: Live-query backend; if None, one is picked per call from the active init system
        """
        self.formula = formula
        self.system = system if system is not None else System()
        self._backend_override = backend
        self._service: ServiceSpec | None = None

    def __repr__(self) -> str:
        return f"ServiceDescriptor({self.formula!r})"

    def _backend(self) -> _AbstractImpl | None:
        if self.system.init_system() is InitSystem.NONE:
            return None
        if self._backend_override is not None:
            return self._backend_override
        return get_backend(self.system)

    # Path and identity

    @property
    def name(self) -> str:
        return self.formula.name

    def service_file(self) -> Path | None:
        """Service definition file shipped in the formula's opt prefix."""
        init_system = self.system.init_system()
        if init_system is InitSystem.LAUNCHD:
            return self.formula.launchd_service_path
        if init_system is InitSystem.SYSTEMD:
            return self.formula.systemd_service_path
        return None

    def service_name(self) -> str | None:
        """launchd label or systemd unit name, None without an init system."""
        init_system = self.system.init_system()
        if init_system is InitSystem.LAUNCHD:
            return self.formula.plist_name
        if init_system is InitSystem.SYSTEMD:
            return self.formula.service_name
        return None

    def dest_dir(self) -> Path | None:
        """Directory the service file is installed into for the caller's privilege level."""
        if self.system.init_system() is InitSystem.NONE:
            return None
        return self.system.path()

    def dest(self) -> Path | None:
        """Installed location of the service file."""
        service_file = self.service_file()
        dest_dir = self.dest_dir()
        if service_file is None or dest_dir is None:
            return None
        return dest_dir / service_file.name

    def is_installed(self) -> bool:
        return self.formula.any_version_installed()

    def service_file_present(self, kind: Literal["any", "root", "user"] = "any") -> bool:
        """Whether the service file is installed at the root-level path, the user-level path, or either.

        Privilege is not consulted: both candidate locations are checked directly.

        Raises:
            ValueError: If kind is not one of "any", "root", "user"
        """
        if kind == "root":
            return self.boot_path_service_file_present()
        if kind == "user":
            return self.user_path_service_file_present()
        if kind == "any":
            return self.boot_path_service_file_present() or self.user_path_service_file_present()
        raise ValueError(f"kind must be 'any', 'root' or 'user', got: {kind!r}")

    def boot_path_service_file_present(self) -> bool:
        return self._present_in(self.system.boot_path())

    def user_path_service_file_present(self) -> bool:
        return self._present_in(self.system.user_path())

    def _present_in(self, directory: Path | None) -> bool:
        service_file = self.service_file()
        if directory is None or service_file is None:
            return False
        return (directory / service_file.name).exists()

    def owner(self) -> str | None:
        """Who the installed service file belongs to: "root", the current user, or None."""
        if self.boot_path_service_file_present():
            return "root"
        if self.user_path_service_file_present():
            return self.system.user()
        return None

    # Installation and load state

    def has_installed_file(self) -> bool:
        """Whether the installed formula ships a service file for the active init system."""
        if not self.is_installed():
            return False
        service_file = self.service_file()
        if service_file is None:
            return False
        if service_file.is_file():
            return True
        opt_prefix = self.formula.opt_prefix
        if not opt_prefix.exists():
            return False
        return any(path.is_file() for path in opt_prefix.glob(f"*{service_file.suffix}"))

    def is_loaded(self) -> bool | None:
        """Whether the init daemon has the service loaded, None without an init system."""
        backend = self._backend()
        if backend is None:
            return None
        return backend.is_loaded(self.service_name())

    def loaded_file(self) -> Path | None:
        """File the init daemon loaded the service from, if it is loaded."""
        backend = self._backend()
        if backend is None:
            return None
        return backend.loaded_file(self.service_name())

    # Status signals

    def _snapshot(self) -> StatusSnapshot | None:
        """Ask the init daemon once; None without an init system."""
        backend = self._backend()
        if backend is None:
            return None
        return backend.status(self.service_name())

    def pid(self) -> int | None:
        backend = self._backend()
        if backend is None:
            return None
        return backend.pid(self.service_name())

    def has_pid(self) -> bool:
        return _is_pid(self.pid())

    def exit_code(self) -> int | None:
        backend = self._backend()
        if backend is None:
            return None
        return backend.exit_code(self.service_name())

    def has_error(self) -> bool:
        """A service with no process and a non-zero last exit code has failed."""
        if self.has_pid():
            return False
        exit_code = self.exit_code()
        return exit_code is not None and exit_code != 0

    def has_unknown_status(self) -> bool:
        return not self.has_pid() and self.exit_code() is None

    def status(self) -> ServiceState:
        return self._state(self._snapshot())

    def _state(self, snapshot: StatusSnapshot | None) -> ServiceState:
        """Collapse one snapshot into a single state."""
        if snapshot is None:
            return ServiceState.NONE
        if _is_pid(snapshot.pid):
            return ServiceState.STARTED
        if not snapshot.loaded:
            return ServiceState.NONE
        if snapshot.exit_code == 0:
            return ServiceState.SCHEDULED if self.is_timed() else ServiceState.STOPPED
        if snapshot.exit_code is not None:
            return ServiceState.ERROR
        # No pid and no exit code left
        return ServiceState.UNKNOWN

    # Declared service

    def has_service(self) -> bool:
        return self.formula.has_service()

    def load_service(self) -> ServiceSpec | None:
        """Load the declared service once; None if the formula declares none.

        Not thread-safe: concurrent first calls may each load the service.
        """
        if not self.has_service():
            return None
        if self._service is None:
            self._service = self.formula.service()
        return self._service

    def is_timed(self) -> bool | None:
        if not self.has_service():
            return None
        return self.load_service().is_timed

    def is_keep_alive(self) -> bool | None:
        if not self.has_service():
            return None
        return self.load_service().is_keep_alive

    def is_service_startup(self) -> bool:
        """Whether the service is started at boot (requires root)."""
        if not self.has_service():
            return False
        return self.load_service().requires_root

    def to_dict(self) -> dict[str, Any]:
        """Assemble the status report.

        Service declaration keys (command, cron, ...) are only present when the
        formula declares a service. All live fields come from a single query of
        the init daemon.
        """
        registered = self.service_file_present()
        snapshot = self._snapshot()
        report: dict[str, Any] = {
            "name": self.name,
            "service_name": self.service_name(),
            "file": self.dest() if registered else self.service_file(),
            "loaded": snapshot.loaded if snapshot else None,
            "loaded_file": snapshot.loaded_file if snapshot else None,
            "pid": snapshot.pid if snapshot else None,
            "exit_code": snapshot.exit_code if snapshot else None,
            "status": self._state(snapshot),
            "registered": registered,
            "running": _is_pid(snapshot.pid) if snapshot else False,
            "schedulable": self.is_timed(),
            "user": self.owner(),
        }
        if not self.has_service():
            return report

        service = self.load_service()
        report.update(
            command=service.manual_command,
            cron=service.cron,
            error_log_path=service.error_log_path,
            interval=service.interval,
            log_path=service.log_path,
            root_dir=service.root_dir,
            working_dir=service.working_dir,
        )
        return report
