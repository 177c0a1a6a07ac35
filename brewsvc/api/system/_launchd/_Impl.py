"""launchd status queries via launchctl."""

import logging
import re
import subprocess
from pathlib import Path

from .._AbstractImpl import _AbstractImpl
from ..StatusSnapshot import StatusSnapshot

logger = logging.getLogger(__name__)

# `launchctl list <label>` prints a plist-like dictionary
_LIST_PID = re.compile(r'"PID"\s*=\s*(-?\d+);')
_LIST_EXIT_CODE = re.compile(r'"LastExitStatus"\s*=\s*(-?\d+);')

# `launchctl print <domain>/<label>` prints indented key = value lines
_PRINT_PID = re.compile(r"^\s*pid\s*=\s*(-?\d+)\s*$", re.MULTILINE)
_PRINT_EXIT_CODE = re.compile(r"^\s*last exit code\s*=\s*(-?\d+)", re.MULTILINE)
_PRINT_PATH = re.compile(r"^\s*path\s*=\s*(.+?)\s*$", re.MULTILINE)


def _match_int(pattern: re.Pattern[str], output: str) -> int | None:
    match = pattern.search(output)
    return int(match.group(1)) if match else None


class _Impl(_AbstractImpl):
    """macOS launchd implementation."""

    def _run(self, cmd: list[str]) -> tuple[str, bool]:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        output = result.stdout.strip()
        logger.debug("%s: %s", " ".join(cmd), output)
        return output, result.returncode == 0 and bool(output)

    def status(self, service_name: str) -> StatusSnapshot:
        output, success = self._run(["launchctl", "list", service_name])
        if success:
            return StatusSnapshot(
                pid=_match_int(_LIST_PID, output),
                exit_code=_match_int(_LIST_EXIT_CODE, output),
                loaded=True,
            )

        # `list` only sees the caller's own domain; `print` can address the domain explicitly
        target = f"{self.system.domain_target()}/{service_name}"
        output, success = self._run(["launchctl", "print", target])
        if not success:
            return StatusSnapshot()

        path_match = _PRINT_PATH.search(output)
        return StatusSnapshot(
            pid=_match_int(_PRINT_PID, output),
            exit_code=_match_int(_PRINT_EXIT_CODE, output),
            loaded=True,
            loaded_file=Path(path_match.group(1)) if path_match else None,
        )
