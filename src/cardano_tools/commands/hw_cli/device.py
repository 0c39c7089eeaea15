"""``cardano-hw-cli device`` commands."""

from ..base import CommandGroup


class HWDeviceCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["device"])

    async def version(self) -> str:
        return await self.execute("version")
