"""``cardano-cli debug`` commands (not era scoped)."""

from typing import Sequence

from ..base import CommandGroup


class DebugCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["debug"])

    async def log_epoch_state(self, arguments: Sequence[str]) -> str:
        """Connect to the local node and log its epoch state."""
        return await self.execute("log-epoch-state", arguments)

    async def transaction_view(self, arguments: Sequence[str]) -> str:
        return (await self.execute("transaction", ["view", *arguments])).strip()
