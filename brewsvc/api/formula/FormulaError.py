"""Error raised for unreadable or invalid formula definitions."""


class FormulaError(ValueError):
    """A formula definition is missing, malformed or fails validation."""
