"""``cardano-cli hash`` commands (not era scoped)."""

from typing import Sequence

from ..base import CommandGroup


class HashCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["hash"])

    async def anchor_data(self, arguments: Sequence[str]) -> str:
        return await self.execute("anchor-data", arguments)

    async def script(self, arguments: Sequence[str]) -> str:
        return await self.execute("script", arguments)

    async def genesis_file(self, arguments: Sequence[str]) -> str:
        return await self.execute("genesis-file", arguments)
