"""Unit tests for the launchd status backend."""

import os
import subprocess
from pathlib import Path

import pytest

from brewsvc.api.system._launchd._Impl import _Impl
from brewsvc.api.system.StatusSnapshot import StatusSnapshot

LIST_RUNNING = """{
\t"LimitLoadToSessionType" = "Aqua";
\t"Label" = "homebrew.redis";
\t"OnDemand" = false;
\t"LastExitStatus" = 0;
\t"PID" = 1234;
\t"Program" = "/opt/homebrew/opt/redis/bin/redis-server";
};
"""

LIST_FAILED = """{
\t"Label" = "homebrew.redis";
\t"LastExitStatus" = 256;
};
"""

PRINT_RUNNING = """gui/501/homebrew.redis = {
\tactive count = 1
\tpath = /Users/me/Library/LaunchAgents/homebrew.redis.plist
\tstate = running
\tprogram = /opt/homebrew/opt/redis/bin/redis-server
\tpid = 1234
\tlast exit code = 0
}
"""

PRINT_NEVER_EXITED = """system/homebrew.redis = {
\tpath = /Library/LaunchDaemons/homebrew.redis.plist
\tstate = not running
\tlast exit code = (never exited)
}
"""


@pytest.fixture
def launchctl(monkeypatch):
    """Fake subprocess.run answering launchctl list/print from a dict."""
    responses: dict[str, tuple[int, str]] = {}
    calls: list[list[str]] = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        returncode, stdout = responses.get(cmd[1], (113, ""))
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    return responses, calls


def test_list_running(launchctl, fake_system):
    responses, calls = launchctl
    responses["list"] = (0, LIST_RUNNING)
    snapshot = _Impl(fake_system()).status("homebrew.redis")
    assert snapshot == StatusSnapshot(pid=1234, exit_code=0, loaded=True)
    assert calls == [["launchctl", "list", "homebrew.redis"]]


def test_list_without_pid(launchctl, fake_system):
    responses, _ = launchctl
    responses["list"] = (0, LIST_FAILED)
    snapshot = _Impl(fake_system()).status("homebrew.redis")
    assert snapshot.pid is None
    assert snapshot.exit_code == 256
    assert snapshot.loaded is True


def test_falls_back_to_print_in_user_domain(launchctl, fake_system):
    responses, calls = launchctl
    responses["print"] = (0, PRINT_RUNNING)
    snapshot = _Impl(fake_system(root=False)).status("homebrew.redis")
    assert snapshot == StatusSnapshot(
        pid=1234,
        exit_code=0,
        loaded=True,
        loaded_file=Path("/Users/me/Library/LaunchAgents/homebrew.redis.plist"),
    )
    assert calls[1] == ["launchctl", "print", f"gui/{os.getuid()}/homebrew.redis"]


def test_print_in_system_domain_never_exited(launchctl, fake_system):
    responses, calls = launchctl
    responses["print"] = (0, PRINT_NEVER_EXITED)
    snapshot = _Impl(fake_system(root=True)).status("homebrew.redis")
    assert calls[1] == ["launchctl", "print", "system/homebrew.redis"]
    assert snapshot.pid is None
    assert snapshot.exit_code is None
    assert snapshot.loaded_file == Path("/Library/LaunchDaemons/homebrew.redis.plist")


def test_unknown_service(launchctl, fake_system):
    backend = _Impl(fake_system())
    assert backend.status("homebrew.nothing") == StatusSnapshot()
    assert backend.is_loaded("homebrew.nothing") is False
    assert backend.pid("homebrew.nothing") is None


def test_empty_output_is_not_loaded(launchctl, fake_system):
    responses, _ = launchctl
    responses["list"] = (0, "")
    responses["print"] = (0, "   ")
    assert _Impl(fake_system()).status("homebrew.redis").loaded is False
