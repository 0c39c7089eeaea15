"""Mithril command groups insert aggregator flags right after the subcommand."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..base import CommandGroup


class MithrilCommandGroup(CommandGroup):
    noun = ""

    def __init__(self, binary) -> None:
        super().__init__(binary, [self.noun])

    @property
    def aggregator_endpoint(self) -> Optional[str]:
        return getattr(self.binary, "aggregator_endpoint", None)

    @property
    def aggregator_args(self) -> List[str]:
        endpoint = self.aggregator_endpoint
        return ["--aggregator-endpoint", endpoint] if endpoint else []

    def command_for(self, subcommand: str, arguments: Sequence[str] = ()) -> List[str]:
        return [*self.base_command, subcommand, *self.aggregator_args, *arguments]

    async def execute_raw(self, subcommand: str, arguments: Sequence[str] = ()) -> str:
        """Run without aggregator flags, for offline tooling."""
        return await self.binary.run_command([*self.base_command, subcommand, *arguments])
