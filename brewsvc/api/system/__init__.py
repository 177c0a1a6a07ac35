"""System module - init system probing and live service queries."""

from .InitSystem import InitSystem
from .StatusSnapshot import StatusSnapshot
from .System import System
from .get_backend import get_backend

__all__ = ["InitSystem", "StatusSnapshot", "System", "get_backend"]
