"""Declared service of a formula, validated with Pydantic."""

import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .KeepAlive import KeepAlive
from .RunType import RunType
from .ServiceNames import ServiceNames

_CRON_MACROS = ("@hourly", "@daily", "@weekly", "@monthly", "@yearly", "@annually")


class ServiceSpec(BaseModel):
    """What a formula's service runs and how the init system should treat it."""

    model_config = ConfigDict(extra="forbid")

    run: list[str] = Field(..., description="Command line (program followed by arguments)")
    run_type: RunType | None = Field(None, description="immediate, interval or cron (inferred if omitted)")
    working_dir: Path | None = Field(None, description="Working directory of the service")
    root_dir: Path | None = Field(None, description="Directory to chroot into")
    log_path: Path | None = Field(None, description="File receiving stdout")
    error_log_path: Path | None = Field(None, description="File receiving stderr")
    interval: int | None = Field(None, gt=0, description="Seconds between runs for interval services")
    cron: str | None = Field(None, description="Five-field cron expression for cron services")
    require_root: bool = Field(False, description="Whether the service must run as root")
    keep_alive: bool | KeepAlive = Field(False, description="Restart policy")
    environment_variables: dict[str, str] = Field(default_factory=dict)
    name: ServiceNames = Field(default_factory=ServiceNames)

    @field_validator("run", mode="before")
    @classmethod
    def normalize_run(cls, v: Any) -> Any:
        if isinstance(v, (str, Path)):
            return [str(v)]
        return v

    @field_validator("run")
    @classmethod
    def validate_run(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("service.run must name a program to execute")
        return v

    @field_validator("cron")
    @classmethod
    def validate_cron(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if v in _CRON_MACROS:
            return v
        if len(v.split()) != 5:
            raise ValueError(f"service.cron must have five fields (minute hour day month weekday), got: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_run_type(self) -> "ServiceSpec":
        if self.run_type is None:
            if self.cron is not None:
                self.run_type = RunType.CRON
            elif self.interval is not None:
                self.run_type = RunType.INTERVAL
            else:
                self.run_type = RunType.IMMEDIATE
        if self.run_type is RunType.INTERVAL and self.interval is None:
            raise ValueError("service.interval is required when run_type is 'interval'")
        if self.run_type is RunType.CRON and self.cron is None:
            raise ValueError("service.cron is required when run_type is 'cron'")
        return self

    @property
    def command(self) -> list[str]:
        return list(self.run)

    @property
    def manual_command(self) -> str:
        """Shell command line that runs the service by hand, environment included."""
        parts = [f'{key}="{value}"' for key, value in self.environment_variables.items() if key != "PATH"]
        parts.extend(shlex.quote(arg) for arg in self.command)
        return " ".join(parts)

    @property
    def requires_root(self) -> bool:
        return self.require_root

    @property
    def is_keep_alive(self) -> bool:
        if isinstance(self.keep_alive, KeepAlive):
            return self.keep_alive.always
        return self.keep_alive

    @property
    def is_timed(self) -> bool:
        return self.run_type in (RunType.INTERVAL, RunType.CRON)
