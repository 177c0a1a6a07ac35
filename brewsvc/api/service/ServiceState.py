"""Overall state of a formula's service."""

from enum import Enum


class ServiceState(str, Enum):
    """Status reported for a service, from strongest signal to weakest."""

    STARTED = "started"
    NONE = "none"
    SCHEDULED = "scheduled"
    STOPPED = "stopped"
    ERROR = "error"
    UNKNOWN = "unknown"
