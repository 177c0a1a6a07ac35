"""How a declared service is started."""

from enum import Enum


class RunType(str, Enum):
    """Service run types: start once, every N seconds, or on a cron schedule."""

    IMMEDIATE = "immediate"
    INTERVAL = "interval"
    CRON = "cron"
