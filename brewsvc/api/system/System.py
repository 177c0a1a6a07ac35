"""Init system probe - answers which service manager is active and who is asking."""

import getpass
import os
import shutil
from pathlib import Path

from ...constants import (
    LAUNCHD_BOOT_PATH,
    LAUNCHD_USER_PATH,
    SYSTEMD_BOOT_PATH,
    SYSTEMD_USER_PATH,
)
from .InitSystem import InitSystem


class System:
    """Probe for the active init system, privilege level and current user.

    Every answer is computed on demand. Nothing is cached because the
    environment (PATH, HOME, effective uid) may change between calls.
    """

    def launchctl(self) -> Path | None:
        """Path to launchctl if it is available."""
        found = shutil.which("launchctl")
        return Path(found) if found else None

    def systemctl(self) -> Path | None:
        """Path to systemctl if it is available."""
        found = shutil.which("systemctl")
        return Path(found) if found else None

    def init_system(self) -> InitSystem:
        """Detect the active init system. launchd wins if both are present."""
        if self.launchctl() is not None:
            return InitSystem.LAUNCHD
        if self.systemctl() is not None:
            return InitSystem.SYSTEMD
        return InitSystem.NONE

    def root(self) -> bool:
        """Whether the caller runs with an effective uid of 0."""
        return os.geteuid() == 0

    def user(self) -> str | None:
        """Name of the (unprivileged) user running the command, None if it cannot be resolved."""
        name = os.environ.get("USER")
        if name:
            return name
        try:
            return getpass.getuser()
        except (KeyError, OSError):
            # No login name variables and no passwd entry for the uid
            return None

    def boot_path(self) -> Path | None:
        """Directory for services started at boot (root-owned)."""
        init_system = self.init_system()
        if init_system is InitSystem.LAUNCHD:
            return Path(LAUNCHD_BOOT_PATH)
        if init_system is InitSystem.SYSTEMD:
            return Path(SYSTEMD_BOOT_PATH)
        return None

    def user_path(self) -> Path | None:
        """Directory for services started at login (user-owned)."""
        init_system = self.init_system()
        if init_system is InitSystem.LAUNCHD:
            return Path.home().joinpath(*LAUNCHD_USER_PATH)
        if init_system is InitSystem.SYSTEMD:
            return Path.home().joinpath(*SYSTEMD_USER_PATH)
        return None

    def path(self) -> Path | None:
        """Service directory matching the caller's privilege level."""
        return self.boot_path() if self.root() else self.user_path()

    def domain_target(self) -> str:
        """launchctl domain for the caller: system for root, gui/<uid> otherwise."""
        if self.root():
            return "system"
        return f"gui/{os.getuid()}"
