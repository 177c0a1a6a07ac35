"""Output schema for the service info command."""

from typing import Any

from pydantic import BaseModel, Field


class ServiceInfoOutput(BaseModel):
    """Status report of one formula's service."""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    service: dict[str, Any] | None = Field(None, description="Report from ServiceDescriptor.to_dict()")
