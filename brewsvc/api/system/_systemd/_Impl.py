"""systemd status queries via systemctl."""

import logging
import subprocess
from contextlib import suppress
from pathlib import Path

from .._AbstractImpl import _AbstractImpl
from ..StatusSnapshot import StatusSnapshot

logger = logging.getLogger(__name__)

_PROPERTIES = ("LoadState", "MainPID", "ExecMainCode", "ExecMainStatus", "FragmentPath")


def _parse_properties(output: str) -> dict[str, str]:
    """Parse `systemctl show` Key=Value lines."""
    props: dict[str, str] = {}
    for line in output.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            props[key.strip()] = value.strip()
    return props


def _int_property(props: dict[str, str], key: str) -> int | None:
    with suppress(ValueError):
        return int(props.get(key, ""))
    return None


class _Impl(_AbstractImpl):
    """Linux systemd implementation (system units for root, user units otherwise)."""

    def _systemctl(self) -> list[str]:
        return ["systemctl"] if self.system.root() else ["systemctl", "--user"]

    def status(self, service_name: str) -> StatusSnapshot:
        cmd = [*self._systemctl(), "show", service_name, f"--property={','.join(_PROPERTIES)}"]
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        output = result.stdout.strip()
        logger.debug("%s: %s", " ".join(cmd), output)
        if result.returncode != 0 or not output:
            return StatusSnapshot()

        props = _parse_properties(output)
        if props.get("LoadState") != "loaded":
            return StatusSnapshot()

        # MainPID=0 means no main process
        pid = _int_property(props, "MainPID") or None

        # ExecMainCode=0 means the main process never exited, so ExecMainStatus is meaningless
        exit_code = None
        if _int_property(props, "ExecMainCode"):
            exit_code = _int_property(props, "ExecMainStatus")

        fragment = props.get("FragmentPath")
        return StatusSnapshot(
            pid=pid,
            exit_code=exit_code,
            loaded=True,
            loaded_file=Path(fragment) if fragment else None,
        )
