"""Load a formula definition by name."""

import json

from pydantic import ValidationError

from ..config.BrewsvcConfig import BrewsvcConfig
from .Formula import Formula
from .FormulaDefinition import FormulaDefinition
from .FormulaError import FormulaError


def load_formula(name: str, config: BrewsvcConfig) -> Formula:
    """Read <formula_dir>/<name>.json and build the Formula it describes.

    Raises:
        FormulaError: If the definition is missing, not valid JSON, or fails validation
    """
    path = config.formula_dir / f"{name}.json"
    if not path.is_file():
        raise FormulaError(f"No available formula with the name {name!r} ({path} not found)")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FormulaError(f"Invalid JSON in formula definition {path}: {e}") from e

    try:
        definition = FormulaDefinition.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(x) for x in first.get("loc", ()))
        detail = f"{field}: {first['msg']}" if field else first["msg"]
        raise FormulaError(f"Invalid formula definition {path}: {detail}") from e

    if definition.name != name:
        raise FormulaError(f"Formula definition {path} declares name {definition.name!r}, expected {name!r}")

    return Formula(definition.name, config.prefix, service=definition.service, definition_path=path)
