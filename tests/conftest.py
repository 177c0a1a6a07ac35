"""Shared pytest configuration and fixtures for all tests."""

import json
import subprocess
from pathlib import Path
from typing import Any

import pytest

from brewsvc.api.system.InitSystem import InitSystem
from brewsvc.api.system.StatusSnapshot import StatusSnapshot
from brewsvc.api.system.System import System
from brewsvc.api.system._AbstractImpl import _AbstractImpl


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Init System Doubles
# =============================================================================


class FakeSystem(System):
    """System probe with fixed answers.

    boot_path can be redirected to a temporary directory; user_path still
    follows $HOME like the real probe.
    """

    def __init__(
        self,
        init_system: InitSystem = InitSystem.LAUNCHD,
        root: bool = False,
        user: str | None = "user",
        boot_path: Path | None = None,
    ):
        self._init_system = init_system
        self._root = root
        self._user = user
        self._boot_path = boot_path
        self.user_calls = 0

    def init_system(self) -> InitSystem:
        return self._init_system

    def root(self) -> bool:
        return self._root

    def user(self) -> str | None:
        self.user_calls += 1
        return self._user

    def boot_path(self) -> Path | None:
        if self._boot_path is not None and self._init_system is not InitSystem.NONE:
            return self._boot_path
        return super().boot_path()


class FakeBackend(_AbstractImpl):
    """Backend returning a fixed snapshot and recording queried service names."""

    def __init__(self, snapshot: StatusSnapshot | None = None):
        super().__init__(FakeSystem())
        self.snapshot = snapshot or StatusSnapshot()
        self.queries: list[str] = []

    def status(self, service_name: str) -> StatusSnapshot:
        self.queries.append(service_name)
        return self.snapshot


@pytest.fixture
def fake_system():
    """Factory for FakeSystem probes."""
    return FakeSystem


@pytest.fixture
def fake_backend():
    """Factory for FakeBackend backends."""
    return FakeBackend


@pytest.fixture
def systemd_host(monkeypatch) -> dict[str, Any]:
    """Make every System() report an unprivileged systemd host.

    Tests fill host["units"] with `systemctl show` output per unit name, or
    set host["init_system"] to simulate another init system.
    """
    host: dict[str, Any] = {"init_system": InitSystem.SYSTEMD, "units": {}}

    def fake_run(cmd, **kwargs):
        stdout = host["units"].get(cmd[-2], "LoadState=not-found\nMainPID=0\n")
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")

    monkeypatch.setattr(System, "init_system", lambda self: host["init_system"])
    monkeypatch.setattr(System, "root", lambda self: False)
    monkeypatch.setattr(System, "user", lambda self: "me")
    monkeypatch.setattr(subprocess, "run", fake_run)
    return host


# =============================================================================
# Environment Helpers
# =============================================================================


@pytest.fixture
def brewsvc_home(tmp_path, monkeypatch) -> Path:
    """Isolated BREWSVC_HOME and HOME under tmp_path."""
    home = tmp_path / "brewsvc_home"
    home.mkdir()
    user_home = tmp_path / "home"
    user_home.mkdir()
    monkeypatch.setenv("BREWSVC_HOME", str(home))
    monkeypatch.setenv("HOME", str(user_home))
    monkeypatch.delenv("HOMEBREW_PREFIX", raising=False)
    return home


@pytest.fixture
def prefix(tmp_path) -> Path:
    """Empty Homebrew prefix."""
    path = tmp_path / "homebrew"
    (path / "opt").mkdir(parents=True)
    (path / "Cellar").mkdir()
    return path


@pytest.fixture
def brewsvc_config(brewsvc_home, prefix) -> dict[str, Any]:
    """Write a minimal valid config.json and return its contents."""
    config = {
        "prefix": str(prefix),
        "formula_dir": str(brewsvc_home / "formulae"),
    }
    (brewsvc_home / "formulae").mkdir()
    (brewsvc_home / "config.json").write_text(json.dumps(config))
    return config


@pytest.fixture
def write_formula(brewsvc_home):
    """Write <formula_dir>/<name>.json; returns the path."""

    def _write(name: str, service: dict[str, Any] | None = None, **extra: Any) -> Path:
        formula_dir = brewsvc_home / "formulae"
        formula_dir.mkdir(exist_ok=True)
        definition: dict[str, Any] = {"name": name, **extra}
        if service is not None:
            definition["service"] = service
        path = formula_dir / f"{name}.json"
        path.write_text(json.dumps(definition))
        return path

    return _write


@pytest.fixture
def install_formula(prefix):
    """Create Cellar/<name>/<version> and opt/<name> for a formula."""

    def _install(name: str, version: str = "1.0") -> Path:
        keg = prefix / "Cellar" / name / version
        keg.mkdir(parents=True)
        (prefix / "opt" / name).symlink_to(keg)
        return keg

    return _install


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run():
    """Expose run_cmd to tests without importing the conftest module."""
    return run_cmd
