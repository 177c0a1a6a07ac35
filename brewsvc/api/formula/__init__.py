"""Formula module - formula definitions and their declared services."""

from .Formula import Formula
from .FormulaError import FormulaError
from .ServiceSpec import ServiceSpec
from .list_formula_names import list_formula_names
from .load_formula import load_formula

__all__ = ["Formula", "FormulaError", "ServiceSpec", "list_formula_names", "load_formula"]
