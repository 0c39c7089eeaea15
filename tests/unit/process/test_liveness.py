import errno
import os
from types import SimpleNamespace

import psutil
import pytest

from cardano_tools.process import liveness
from cardano_tools.process.liveness import ProcessLivenessGuard, probe_pid


def _fake_status(status):
    class _FakeProcess:
        def __init__(self, pid):
            self.pid = pid

        def status(self):
            if isinstance(status, BaseException):
                raise status
            return status

    return _FakeProcess


def _raising_kill(exc):
    def _kill(pid, sig):
        raise exc

    return _kill


@pytest.fixture
def running_pid(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", lambda pid, sig: None)
    monkeypatch.setattr(liveness.psutil, "Process", _fake_status(psutil.STATUS_SLEEPING))
    return 4242


def test_unattached_guard_is_not_alive():
    assert ProcessLivenessGuard().is_alive() is False


def test_terminated_flag_wins_without_probing(monkeypatch):
    def _unexpected(pid, sig):
        raise AssertionError("probe should not run")

    monkeypatch.setattr(liveness.os, "kill", _unexpected)
    guard = ProcessLivenessGuard()
    guard.attach(SimpleNamespace(pid=4242, returncode=None))
    guard.mark_terminated()

    assert guard.is_alive() is False


def test_os_reported_exit_wins_without_probing(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", _raising_kill(AssertionError("probe should not run")))
    guard = ProcessLivenessGuard()
    guard.attach(SimpleNamespace(pid=4242, returncode=0))

    assert guard.is_alive() is False


def test_stale_os_state_is_caught_by_probe(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", _raising_kill(ProcessLookupError()))
    guard = ProcessLivenessGuard()
    guard.attach(SimpleNamespace(pid=4242, returncode=None))

    assert guard.is_alive() is False


def test_running_process_is_alive(running_pid):
    guard = ProcessLivenessGuard()
    guard.attach(SimpleNamespace(pid=running_pid, returncode=None))

    assert guard.is_alive() is True


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ProcessLookupError(), False),
        (PermissionError(), True),
        (OSError(errno.ESRCH, "no such process"), False),
        (OSError(errno.EPERM, "not permitted"), True),
    ],
)
def test_probe_interprets_signal_errors(monkeypatch, exc, expected):
    monkeypatch.setattr(liveness.os, "kill", _raising_kill(exc))

    assert probe_pid(4242, os_reports_running=not expected) is expected


@pytest.mark.parametrize("fallback", [True, False])
def test_inconclusive_probe_uses_os_state(monkeypatch, fallback):
    monkeypatch.setattr(liveness.os, "kill", _raising_kill(OSError(errno.EINVAL, "invalid")))

    assert probe_pid(4242, os_reports_running=fallback) is fallback


def test_zombie_counts_as_dead(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", lambda pid, sig: None)
    monkeypatch.setattr(liveness.psutil, "Process", _fake_status(psutil.STATUS_ZOMBIE))

    assert probe_pid(4242, os_reports_running=True) is False


def test_vanished_between_probes_counts_as_dead(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", lambda pid, sig: None)
    monkeypatch.setattr(liveness.psutil, "Process", _fake_status(psutil.NoSuchProcess(4242)))

    assert probe_pid(4242, os_reports_running=True) is False


def test_unreadable_status_falls_back(monkeypatch):
    monkeypatch.setattr(liveness.os, "kill", lambda pid, sig: None)
    monkeypatch.setattr(liveness.psutil, "Process", _fake_status(psutil.AccessDenied(4242)))

    assert probe_pid(4242, os_reports_running=True) is True


def test_probe_on_own_pid_is_alive():
    assert probe_pid(os.getpid(), os_reports_running=False) is True
