"""Service list command - status reports of all installed formulae with a service."""

import logging
from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ..config.BrewsvcConfig import BrewsvcConfig
from ..formula.list_formula_names import list_formula_names
from ..formula.load_formula import load_formula
from .ServiceDescriptor import ServiceDescriptor
from .ServiceListOutput import ServiceListOutput

logger = logging.getLogger(__name__)


def cmd_list() -> StageResult:
    """List services of installed formulae."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = BrewsvcConfig.load()
        except ValueError as e:
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceListOutput(errors=[str(e)]).model_dump(mode="json")
            result_obj.success = False
            return

        names = list_formula_names(config)
        errors: list[str] = []
        warnings: list[str] = []
        services: list[dict[str, Any]] = []

        for index, name in enumerate(names):
            yield (0.1 + 0.9 * index / len(names), f"Checking {name}...")
            try:
                descriptor = ServiceDescriptor(load_formula(name, config))
                if not descriptor.is_installed():
                    continue
                if not (descriptor.has_service() or descriptor.has_installed_file()):
                    continue
                services.append(descriptor.to_dict())
            except (ValueError, OSError) as e:
                logger.error("Service status of %s failed: %s", name, e)
                errors.append(f"{name}: {e}")

        if not services and not errors:
            warnings.append("No services available to control")

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(services)} service(s)"
        result_obj.output = ServiceListOutput(
            errors=errors,
            warnings=warnings,
            services=services,
        ).model_dump(mode="json")
        result_obj.success = len(errors) == 0

    return StageResult(
        announce="Listing services...",
        progress_callback=do_work,
    )
