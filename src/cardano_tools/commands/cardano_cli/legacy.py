"""``cardano-cli legacy`` commands (not era scoped)."""

from typing import Sequence

from ..base import CommandGroup


class LegacyCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["legacy"])

    async def genesis(self, arguments: Sequence[str]) -> str:
        return await self.execute("genesis", arguments)

    async def governance(self, arguments: Sequence[str]) -> str:
        return await self.execute("governance", arguments)
