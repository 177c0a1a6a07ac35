"""List formula names that have a definition file."""

from ..config.BrewsvcConfig import BrewsvcConfig


def list_formula_names(config: BrewsvcConfig) -> list[str]:
    """Return sorted names of all <name>.json definitions in the formula directory."""
    if not config.formula_dir.is_dir():
        return []
    return sorted(path.stem for path in config.formula_dir.glob("*.json") if path.is_file())
