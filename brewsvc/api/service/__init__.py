"""Service module - per-formula service status."""

from .ServiceDescriptor import ServiceDescriptor
from .ServiceInfoOutput import ServiceInfoOutput
from .ServiceListOutput import ServiceListOutput
from .ServiceState import ServiceState

__all__ = ["ServiceDescriptor", "ServiceInfoOutput", "ServiceListOutput", "ServiceState"]
