"""Service info command - status report of one formula's service."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from ..config.BrewsvcConfig import BrewsvcConfig
from ..formula.load_formula import load_formula
from .ServiceDescriptor import ServiceDescriptor
from .ServiceInfoOutput import ServiceInfoOutput

logger = logging.getLogger(__name__)


def cmd_info(name: str) -> StageResult:
    """Report the service status of a formula."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        warnings: list[str] = []
        try:
            config = BrewsvcConfig.load()
            formula = load_formula(name, config)
        except ValueError as e:
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceInfoOutput(errors=[str(e)]).model_dump(mode="json")
            result_obj.success = False
            return

        yield (0.4, f"Querying service status of {name}...")
        descriptor = ServiceDescriptor(formula)
        try:
            report = descriptor.to_dict()
        except (ValueError, OSError) as e:
            logger.error("Service status of %s failed: %s", name, e)
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceInfoOutput(errors=[str(e)]).model_dump(mode="json")
            result_obj.success = False
            return

        if report["service_name"] is None:
            warnings.append("No supported init system found (neither launchctl nor systemctl is available)")
        if not descriptor.is_installed():
            warnings.append(f"Formula {name} is not installed")
        if not descriptor.has_service():
            warnings.append(f"Formula {name} does not declare a service")

        yield (1.0, "Complete")
        result_obj.result = f"Service {name}: {report['status'].value}"
        result_obj.output = ServiceInfoOutput(warnings=warnings, service=report).model_dump(mode="json")
        result_obj.success = True

    return StageResult(
        announce=f"Checking service of {name}...",
        progress_callback=do_work,
    )
