"""Output schema for the service list command."""

from typing import Any

from pydantic import BaseModel, Field


class ServiceListOutput(BaseModel):
    """Status reports of all installed formulae that have a service."""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    services: list[dict[str, Any]] = Field(default_factory=list)
