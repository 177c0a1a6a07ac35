"""On-disk formula definition (<formula_dir>/<name>.json)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormulaDefinition(BaseModel):
    """Raw formula definition. The service block stays unrendered until it is loaded."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Formula name")
    desc: str | None = Field(None, description="One-line description")
    service: dict[str, Any] | None = Field(None, description="Service declaration (templated)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or "/" in v or v.startswith("."):
            raise ValueError(f"formula name must be a plain file name, got: {v!r}")
        return v
