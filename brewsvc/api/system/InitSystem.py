"""Init system kinds a service can be managed by."""

from enum import Enum


class InitSystem(str, Enum):
    """Which init system is active on this machine."""

    LAUNCHD = "launchd"
    SYSTEMD = "systemd"
    NONE = "none"
