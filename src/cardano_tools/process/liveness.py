"""
Cross-check whether a supervised child is still alive.

The OS-reported return code of an asyncio child can lag behind a natural exit,
so the answer is assembled from three sources in order: the handle's own
terminated flag, the OS-reported state, then a non-disruptive signal probe.
"""

from __future__ import annotations

import errno
import logging
import os
from typing import Optional, Protocol

import psutil

logger = logging.getLogger(__name__)


class _ProcessLike(Protocol):
    pid: int
    returncode: Optional[int]


class ProcessLivenessGuard:
    """Answer ``is the child alive`` without crashing or blocking."""

    def __init__(self) -> None:
        self.terminated = False
        self.process: Optional[_ProcessLike] = None

    def attach(self, process: _ProcessLike) -> None:
        self.process = process

    def mark_terminated(self) -> None:
        self.terminated = True

    def is_alive(self) -> bool:
        if self.terminated:
            return False
        process = self.process
        if process is None:
            return False
        if process.returncode is not None:
            return False
        return probe_pid(process.pid, os_reports_running=True)


def probe_pid(pid: int, *, os_reports_running: bool) -> bool:
    """
    Probe *pid* with signal 0.

    Args:
        pid: Process identifier to probe
        os_reports_running: Fallback answer when the probe is inconclusive

    Returns:
        True when the process exists, even if it belongs to another user
    """
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    except OSError as exc:
        if exc.errno == errno.ESRCH:
            return False
        if exc.errno == errno.EPERM:
            return True
        logger.debug("Liveness probe for pid %s inconclusive: %s", pid, exc)
        return os_reports_running
    return not _is_zombie(pid, os_reports_running)


def _is_zombie(pid: int, fallback_alive: bool) -> bool:
    try:
        return psutil.Process(pid).status() == psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return True
    except psutil.Error as exc:
        logger.debug("Could not read status of pid %s: %s", pid, exc)
        return not fallback_alive


__all__ = ["ProcessLivenessGuard", "probe_pid"]
