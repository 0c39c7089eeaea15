"""``cardano-cli <era> stake-pool`` commands."""

from typing import Sequence

from ..base import EraCommandGroup


class StakePoolCommands(EraCommandGroup):
    noun = "stake-pool"

    async def metadata_hash(self, arguments: Sequence[str]) -> str:
        return await self.execute("metadata-hash", arguments)

    async def registration_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("registration-certificate", arguments)

    async def deregistration_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("deregistration-certificate", arguments)

    async def id(self, arguments: Sequence[str]) -> str:
        return await self.execute("id", arguments)
