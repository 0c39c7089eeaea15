"""
Shared plumbing for binary wrappers.

Capabilities are composed rather than inherited from one another:
``VersionedExecutable`` reports a version, ``SupportsCommands`` runs one-shot
subcommands, and ``SupportsSupervision`` adds a daemon lifecycle whose
``version()`` is served by a ``CommandRunner``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar, Dict, List, Mapping, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from ..config.settings import ToolSettings
from ..errors import BinaryNotFoundError, ProcessAlreadyRunningError
from ..process import DEFAULT_GRACE_PERIOD, CommandRunner, SupervisedProcess, ensure_working_directory, validate_binary
from ..version_gate import check_version

W = TypeVar("W", bound="BinaryWrapper")


@runtime_checkable
class VersionedExecutable(Protocol):
    binary_name: ClassVar[str]
    minimum_version: ClassVar[str]
    binary_path: Path

    async def version(self) -> str: ...


@runtime_checkable
class SupportsCommands(Protocol):
    async def run_command(self, arguments: Sequence[str]) -> str: ...

    async def run_command_bytes(self, arguments: Sequence[str]) -> bytes: ...


@runtime_checkable
class SupportsSupervision(Protocol):
    @property
    def is_running(self) -> bool: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...


class BinaryWrapper:
    """Validated binary path, working directory and one-shot runner for one executable."""

    binary_name: ClassVar[str] = ""
    minimum_version: ClassVar[str] = "0"
    version_arguments: ClassVar[Sequence[str]] = ("--version",)

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        if binary_path is None:
            raise BinaryNotFoundError.not_configured(self.binary_name)
        self.binary_path = validate_binary(Path(binary_path), self.binary_name)
        self.working_directory = ensure_working_directory(
            Path(working_directory) if working_directory is not None else Path.cwd()
        )
        self.env: Dict[str, str] = dict(env) if env else {}
        self.logger = logger or logging.getLogger(f"cardano_tools.{self.binary_name}")
        self.runner = runner or CommandRunner(self.logger)

    @classmethod
    def from_settings(
        cls: type[W],
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> W:
        raise NotImplementedError

    @classmethod
    async def create(
        cls: type[W],
        settings: ToolSettings,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> W:
        """Build the wrapper from *settings* and refuse binaries older than ``minimum_version``."""
        wrapper = cls.from_settings(settings, logger=logger, runner=runner)
        await wrapper.check_version()
        return wrapper

    async def run_command(self, arguments: Sequence[str], *, timeout: Optional[float] = None) -> str:
        return await self.runner.run(
            self.binary_path, list(arguments), self.working_directory, env=self.env or None, timeout=timeout
        )

    async def run_command_bytes(self, arguments: Sequence[str], *, timeout: Optional[float] = None) -> bytes:
        return await self.runner.run_bytes(
            self.binary_path, list(arguments), self.working_directory, env=self.env or None, timeout=timeout
        )

    def parse_version(self, output: str) -> str:
        return output

    async def version(self) -> str:
        output = await self.run_command(self.version_arguments)
        return self.parse_version(output)

    async def help(self) -> str:
        return await self.run_command(["help"])

    async def check_version(self) -> None:
        current = await self.version()
        self.logger.debug("%s version: %s", self.binary_name, current)
        self.logger.debug("Minimum required version: %s", self.minimum_version)
        check_version(current, self.minimum_version, binary_name=self.binary_name, logger=self.logger)


class SupervisedBinary(BinaryWrapper):
    """
    A daemon binary. Each ``start()`` launches a fresh ``SupervisedProcess``
    handle; a handle that is still running refuses a second start.
    """

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        show_output: Optional[bool] = None,
        grace_period: float = DEFAULT_GRACE_PERIOD,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        super().__init__(binary_path, working_directory, env=env, logger=logger, runner=runner)
        self.show_output = True if show_output is None else show_output
        self.grace_period = grace_period
        self.process: Optional[SupervisedProcess] = None

    def build_arguments(self) -> List[str]:
        raise NotImplementedError

    @property
    def is_running(self) -> bool:
        return self.process is not None and self.process.is_running

    async def start(self) -> None:
        """
        Launch the daemon with arguments derived from settings.

        Raises:
            ProcessAlreadyRunningError: If the current handle is still running
        """
        if self.is_running:
            raise ProcessAlreadyRunningError(self.binary_name)
        arguments = self.build_arguments()
        self.process = SupervisedProcess(
            self.binary_path,
            self.working_directory,
            self.show_output,
            grace_period=self.grace_period,
            binary_name=self.binary_name,
            env=self.env or None,
            runner=self.runner,
            logger=self.logger,
        )
        self.logger.info("Starting %s with output %s", self.binary_name, "shown" if self.show_output else "hidden")
        await self.process.start(arguments)

    async def stop(self) -> None:
        if self.process is None:
            return
        await self.process.stop()

    async def wait(self) -> Optional[int]:
        if self.process is None:
            return None
        return await self.process.wait()


def second_token(output: str) -> Optional[str]:
    """Return the second whitespace-separated token of *output*, if any."""
    parts = output.split()
    if len(parts) < 2:
        return None
    return parts[1]


__all__ = [
    "BinaryWrapper",
    "SupervisedBinary",
    "SupportsCommands",
    "SupportsSupervision",
    "VersionedExecutable",
    "second_token",
]
