"""Per-platform service name overrides."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceNames(BaseModel):
    """Service identifiers replacing the default homebrew.<formula> name."""

    model_config = ConfigDict(extra="forbid")

    macos: str | None = Field(None, description="launchd label")
    linux: str | None = Field(None, description="systemd unit name (without .service)")
