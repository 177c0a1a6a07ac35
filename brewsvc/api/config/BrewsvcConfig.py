"""Top-level brewsvc configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import BREWSVC_HOME_EXT


class BrewsvcConfig(BaseModel):
    """Configuration for locating formulae and their service definitions."""

    model_config = ConfigDict(extra="forbid")

    prefix: Path = Field(..., description="Homebrew installation prefix (contains opt/ and Cellar/)")
    formula_dir: Path = Field(..., description="Directory holding <name>.json formula definitions")
    log_level: str = Field("INFO", description="Logging level name for the CLI")

    @field_validator("prefix", "formula_dir")
    @classmethod
    def expand_paths(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a logging level name, got: {v!r}")
        return level

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get brewsvc home directory based on BREWSVC_HOME or default to ~/.brewsvc."""
        home_env = os.environ.get("BREWSVC_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / BREWSVC_HOME_EXT

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the brewsvc home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "BrewsvcConfig":
        """Load and validate config from file.

        HOMEBREW_PREFIX in the environment overrides the configured prefix.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        prefix_env = os.environ.get("HOMEBREW_PREFIX")
        if prefix_env:
            raw["prefix"] = prefix_env

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            detail = f"{field}: {first['msg']}" if field else first["msg"]
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
