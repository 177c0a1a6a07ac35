"""Detailed keep-alive declaration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class KeepAlive(BaseModel):
    """Conditions under which the init system should restart a service."""

    model_config = ConfigDict(extra="forbid")

    always: bool = Field(True, description="Restart whenever the service exits")
    successful_exit: bool | None = Field(None, description="Restart only after a zero (True) or non-zero (False) exit")
    crashed: bool | None = Field(None, description="Restart only after a crash")
    path: Path | None = Field(None, description="Keep alive while this path exists")
