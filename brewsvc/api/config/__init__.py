"""Config module - brewsvc configuration loading."""

from .BrewsvcConfig import BrewsvcConfig

__all__ = ["BrewsvcConfig"]
