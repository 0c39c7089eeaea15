"""
Command-builder base.

A ``CommandGroup`` binds one wrapped binary to a base command (the binary's
current era plus a noun for cardano-cli, a noun for the other binaries) and composes
``base_command + [subcommand] + arguments`` for each call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..config.network import Era, Network
from ..errors import InvalidOutputError

if TYPE_CHECKING:
    from ..binaries.base import SupportsCommands


class CommandGroup:
    """Shared argument composition and output post-processing for one command noun."""

    def __init__(self, binary: "SupportsCommands", base_command: Sequence[str] = ()) -> None:
        self.binary = binary
        self._base_command: List[str] = list(base_command)

    @property
    def base_command(self) -> List[str]:
        return list(self._base_command)

    @property
    def network(self) -> Network:
        return getattr(self.binary, "network", Network.MAINNET)

    @property
    def era(self) -> Era:
        return getattr(self.binary, "era", Era.CONWAY)

    @property
    def network_args(self) -> List[str]:
        return self.network.arguments

    def command_for(self, subcommand: str, arguments: Sequence[str] = ()) -> List[str]:
        return [*self.base_command, subcommand, *arguments]

    async def execute(self, subcommand: str, arguments: Sequence[str] = ()) -> str:
        return await self.binary.run_command(self.command_for(subcommand, arguments))

    async def execute_bytes(self, subcommand: str, arguments: Sequence[str] = ()) -> bytes:
        return await self.binary.run_command_bytes(self.command_for(subcommand, arguments))

    async def execute_with_network(self, subcommand: str, arguments: Sequence[str] = ()) -> str:
        return await self.execute(subcommand, [*arguments, *self.network_args])


class EraCommandGroup(CommandGroup):
    """cardano-cli group whose base command is ``[<era>, <noun>]``."""

    noun = ""

    @property
    def base_command(self) -> List[str]:
        # read per call so a later change to the binary era applies
        return [Era.parse(self.era).value, self.noun]


def split_lines(output: str) -> List[str]:
    return [line for line in output.splitlines() if line.strip()]


def parse_int_token(output: str, *, last: bool = True) -> int:
    """Parse the last (or first) whitespace-separated token of *output* as an integer."""
    tokens = output.split()
    if not tokens:
        raise InvalidOutputError("Expected an integer in empty output")
    token = tokens[-1] if last else tokens[0]
    try:
        return int(token)
    except ValueError as exc:
        raise InvalidOutputError(f"Could not parse integer from: {output}") from exc


def optional_flag(flag: str, value: Optional[object]) -> List[str]:
    """Return ``[flag, str(value)]`` when *value* is set, otherwise nothing."""
    if value is None:
        return []
    return [flag, str(value)]


def switch(flag: str, enabled: Optional[bool]) -> List[str]:
    return [flag] if enabled else []


__all__ = ["CommandGroup", "EraCommandGroup", "optional_flag", "parse_int_token", "split_lines", "switch"]
