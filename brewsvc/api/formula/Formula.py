"""A formula (package) that may declare a background service."""

from pathlib import Path
from typing import Any

from jinja2 import TemplateError
from pydantic import ValidationError

from ...constants import SERVICE_NAME_PREFIX
from .FormulaError import FormulaError
from .ServiceSpec import ServiceSpec
from ._render_service import _render_service


class Formula:
    """Installed (or installable) formula under a Homebrew prefix.

    Paths are derived from the prefix; nothing is read from disk until a
    method asks for it.
    """

    def __init__(
        self,
        name: str,
        prefix: Path,
        service: dict[str, Any] | None = None,
        definition_path: Path | None = None,
    ):
        self.name = name
        self.prefix = Path(prefix)
        self.definition_path = definition_path
        self._service_data = service

    def __repr__(self) -> str:
        return f"Formula({self.name!r}, prefix={str(self.prefix)!r})"

    @property
    def opt_prefix(self) -> Path:
        return self.prefix / "opt" / self.name

    @property
    def cellar(self) -> Path:
        return self.prefix / "Cellar" / self.name

    def _name_override(self, platform: str) -> str | None:
        names = (self._service_data or {}).get("name")
        if isinstance(names, dict):
            override = names.get(platform)
            if isinstance(override, str) and override:
                return override
        return None

    @property
    def plist_name(self) -> str:
        """launchd label of the service."""
        return self._name_override("macos") or f"{SERVICE_NAME_PREFIX}.{self.name}"

    @property
    def service_name(self) -> str:
        """systemd unit name of the service (without the .service suffix)."""
        return self._name_override("linux") or f"{SERVICE_NAME_PREFIX}.{self.name}"

    @property
    def launchd_service_path(self) -> Path:
        return self.opt_prefix / f"{self.plist_name}.plist"

    @property
    def systemd_service_path(self) -> Path:
        return self.opt_prefix / f"{self.service_name}.service"

    def any_version_installed(self) -> bool:
        """Whether at least one version of the formula is in the cellar."""
        if not self.cellar.is_dir():
            return False
        return any(child.is_dir() for child in self.cellar.iterdir())

    def has_service(self) -> bool:
        """Whether the formula declares a service at all."""
        return self._service_data is not None

    def template_context(self) -> dict[str, Any]:
        """Variables available to templated service values."""
        return {
            "name": self.name,
            "prefix": self.prefix,
            "opt_prefix": self.opt_prefix,
            "opt_bin": self.opt_prefix / "bin",
            "opt_sbin": self.opt_prefix / "sbin",
            "etc": self.prefix / "etc",
            "var": self.prefix / "var",
            "home": Path.home(),
        }

    def service(self) -> ServiceSpec | None:
        """Render and validate the declared service.

        Returns:
            ServiceSpec, or None if the formula declares no service

        Raises:
            FormulaError: If the declaration cannot be rendered or validated
        """
        if self._service_data is None:
            return None
        source = self.definition_path or self.name
        try:
            rendered = _render_service(self._service_data, self.template_context())
        except TemplateError as e:
            raise FormulaError(f"Cannot render service of {source}: {e}") from e
        try:
            return ServiceSpec.model_validate(rendered)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{field}: {first['msg']}" if field else first["msg"]
            raise FormulaError(f"Invalid service in {source}: {detail}") from e
