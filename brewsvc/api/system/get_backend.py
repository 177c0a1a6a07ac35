"""Pick the live-query backend for the active init system."""

from .InitSystem import InitSystem
from .System import System
from ._AbstractImpl import _AbstractImpl

# Registry: add new backends here (ONLY place backend modules are enumerated)
_BACKEND_REGISTRY: dict[InitSystem, str] = {
    InitSystem.LAUNCHD: "_launchd",
    InitSystem.SYSTEMD: "_systemd",
}


def get_backend(system: System) -> _AbstractImpl | None:
    """Return a backend for the currently active init system, or None if there is none."""
    backend_dir = _BACKEND_REGISTRY.get(system.init_system())
    if backend_dir is None:
        return None
    module = __import__(f"brewsvc.api.system.{backend_dir}._Impl", fromlist=[""])
    return module._Impl(system)
