"""Shared constants for brewsvc directories and service locations."""

BREWSVC_HOME_EXT = ".brewsvc"  # user-level state/config directory suffix

# Default service name prefix for both plists and systemd units
SERVICE_NAME_PREFIX = "homebrew"

# Root-level service directories (boot paths)
LAUNCHD_BOOT_PATH = "/Library/LaunchDaemons"
SYSTEMD_BOOT_PATH = "/usr/lib/systemd/system"

# User-level service directories, relative to $HOME
LAUNCHD_USER_PATH = ("Library", "LaunchAgents")
SYSTEMD_USER_PATH = (".config", "systemd", "user")
