"""
One-shot invocation of external binaries.

Each call launches exactly one OS process with its own stdout/stderr pipes and
waits for it to exit. Nothing is shared between calls, so concurrent
invocations never serialize behind each other.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from ..errors import CommandFailedError, InvalidOutputError

_MODULE_LOGGER = logging.getLogger(__name__)


def _decode_stderr(stderr: bytes | None) -> Optional[str]:
    if not stderr:
        return None
    try:
        text = stderr.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return text.strip() or None


def _kill_quietly(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        _MODULE_LOGGER.debug("Process %s exited before it could be killed", process.pid)


def build_environment(overrides: Optional[Mapping[str, str]]) -> Optional[dict[str, str]]:
    """Return the child environment: the parent's, with *overrides* applied on top."""
    if not overrides:
        return None
    merged = dict(os.environ)
    merged.update({key: str(value) for key, value in overrides.items()})
    return merged


class CommandRunner:
    """Run an executable to completion and capture its output."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or _MODULE_LOGGER

    async def run_bytes(
        self,
        executable: Path | str,
        arguments: Sequence[str] = (),
        working_directory: Path | str | None = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Run *executable* with *arguments* and return its raw stdout.

        Args:
            executable: Absolute path of the binary
            arguments: Argument vector, order preserved
            working_directory: Directory the child runs in
            env: Variables overriding the inherited parent environment
            timeout: Seconds to wait before killing the child

        Returns:
            Captured stdout bytes

        Raises:
            CommandFailedError: On non-zero exit, launch failure or timeout
            asyncio.CancelledError: If the awaiting task is cancelled; the child is killed first
        """
        command: List[str] = [str(executable), *arguments]
        self.logger.debug("Running command: %s", " ".join(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(working_directory) if working_directory is not None else None,
                env=build_environment(env),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CommandFailedError(command, str(exc)) from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError as exc:
            _kill_quietly(process)
            await process.wait()
            raise CommandFailedError(command, f"timed out after {timeout}s") from exc
        except asyncio.CancelledError:
            _kill_quietly(process)
            await asyncio.shield(process.wait())
            raise

        if process.returncode != 0:
            detail = _decode_stderr(stderr)
            self.logger.error("CLI command failed with exit code %s", process.returncode)
            self.logger.error("Error output: %s", detail)
            raise CommandFailedError(command, detail)

        return stdout or b""

    async def run(
        self,
        executable: Path | str,
        arguments: Sequence[str] = (),
        working_directory: Path | str | None = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """Run *executable* and return stdout decoded as UTF-8 with surrounding whitespace trimmed."""
        raw = await self.run_bytes(executable, arguments, working_directory, env=env, timeout=timeout)
        try:
            output = raw.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise InvalidOutputError(f"Output of {executable} is not valid UTF-8") from exc
        self.logger.debug("CLI command output: %s", output)
        return output


__all__ = ["CommandRunner", "build_environment"]
