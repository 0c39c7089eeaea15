"""Process location, one-shot invocation and daemon supervision."""

from .liveness import ProcessLivenessGuard, probe_pid
from .locator import ensure_working_directory, locate_binary, validate_binary
from .one_shot import CommandRunner, build_environment
from .supervised import DEFAULT_GRACE_PERIOD, ProcessState, SupervisedProcess

__all__ = [
    "DEFAULT_GRACE_PERIOD",
    "CommandRunner",
    "ProcessLivenessGuard",
    "ProcessState",
    "SupervisedProcess",
    "build_environment",
    "ensure_working_directory",
    "locate_binary",
    "probe_pid",
    "validate_binary",
]
