"""
Long-lived subprocess supervision.

A ``SupervisedProcess`` owns exactly one child for its whole life:
NOT_STARTED -> RUNNING -> TERMINATED. Restarting requires a fresh handle.
Lifecycle calls on one handle must be serialized by its owner.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from ..errors import CardanoToolsError, CommandFailedError, ProcessAlreadyRunningError
from .liveness import ProcessLivenessGuard
from .one_shot import CommandRunner, build_environment

DEFAULT_GRACE_PERIOD = 10.0


class ProcessState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    TERMINATED = "terminated"


class SupervisedProcess:
    """Start, observe and stop one daemon process."""

    def __init__(
        self,
        binary_path: Path | str,
        working_directory: Path | str | None = None,
        show_output: bool = False,
        *,
        grace_period: float = DEFAULT_GRACE_PERIOD,
        binary_name: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        runner: Optional[CommandRunner] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.binary_path = Path(binary_path)
        self.working_directory = Path(working_directory) if working_directory is not None else None
        self.show_output = show_output
        self.grace_period = grace_period
        self.binary_name = binary_name or self.binary_path.name
        self.env = dict(env) if env else None
        self.logger = logger or logging.getLogger(f"cardano_tools.{self.binary_name}")
        self.runner = runner or CommandRunner(self.logger)
        self.arguments: List[str] = []
        self._process: Optional[asyncio.subprocess.Process] = None
        self._guard = ProcessLivenessGuard()

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process is not None else None

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode if self._process is not None else None

    @property
    def state(self) -> ProcessState:
        if self._process is None:
            return ProcessState.NOT_STARTED
        if self._guard.is_alive():
            return ProcessState.RUNNING
        return ProcessState.TERMINATED

    @property
    def is_running(self) -> bool:
        return self._guard.is_alive()

    async def start(self, arguments: Sequence[str] = ()) -> None:
        """
        Launch the child with *arguments*.

        With output hidden, returns once the OS confirms the launch. With
        output shown, the child inherits the parent's streams and this call
        returns only after the child exits.

        Raises:
            ProcessAlreadyRunningError: If this handle is running
            CardanoToolsError: If this handle already ran to termination
            CommandFailedError: If the OS refuses to launch the binary
        """
        if self.is_running:
            raise ProcessAlreadyRunningError(self.binary_name)
        if self._process is not None:
            raise CardanoToolsError(f"{self.binary_name} handle has terminated; create a new handle to start again")

        command = [str(self.binary_path), *arguments]
        stream = None if self.show_output else asyncio.subprocess.DEVNULL
        self.logger.debug("Starting process: %s", " ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(self.working_directory) if self.working_directory is not None else None,
                env=build_environment(self.env),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=stream,
                stderr=stream,
            )
        except OSError as exc:
            raise CommandFailedError(command, str(exc)) from exc

        self._process = process
        self._guard.attach(process)
        self.arguments = list(arguments)
        self.logger.info("%s started with pid %s", self.binary_name, process.pid)

        if not self.show_output:
            return
        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            self._force_kill()
            raise
        self._guard.mark_terminated()
        self.logger.info("%s exited with code %s", self.binary_name, returncode)

    async def stop(self) -> None:
        """Interrupt the child, escalating to a kill after the grace period."""
        if not self.is_running:
            return
        process = self._process
        if process is None:
            return

        self.logger.info("Stopping %s (pid %s)", self.binary_name, process.pid)
        try:
            process.send_signal(signal.SIGINT)
        except ProcessLookupError:
            self._guard.mark_terminated()
            return

        try:
            await asyncio.wait_for(process.wait(), timeout=self.grace_period)
        except asyncio.TimeoutError:
            self.logger.warning(
                "%s did not exit within %.1fs of SIGINT; killing pid %s",
                self.binary_name,
                self.grace_period,
                process.pid,
            )
            self._force_kill()
            return
        self._guard.mark_terminated()
        self.logger.info("%s stopped with code %s", self.binary_name, process.returncode)

    async def wait(self) -> Optional[int]:
        """Wait for the child to exit and return its exit code (None if never started)."""
        process = self._process
        if process is None:
            return None
        returncode = await process.wait()
        self._guard.mark_terminated()
        return returncode

    async def version(self, flag: str = "--version") -> str:
        """Run the binary once with *flag*; independent of the supervised child."""
        return await self.runner.run(self.binary_path, [flag], self.working_directory, env=self.env)

    def _force_kill(self) -> None:
        process = self._process
        if process is not None and process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                self.logger.debug("%s exited before it could be killed", self.binary_name)
        self._guard.mark_terminated()


__all__ = ["DEFAULT_GRACE_PERIOD", "ProcessState", "SupervisedProcess"]
