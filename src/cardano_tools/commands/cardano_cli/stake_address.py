"""``cardano-cli <era> stake-address`` commands."""

from typing import Sequence

from ..base import EraCommandGroup


class StakeAddressCommands(EraCommandGroup):
    noun = "stake-address"

    async def key_gen(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-gen", arguments)

    async def key_hash(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-hash", arguments)

    async def build(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("build", arguments)

    async def registration_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("registration-certificate", arguments)

    async def deregistration_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("deregistration-certificate", arguments)

    async def stake_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("stake-delegation-certificate", arguments)

    async def stake_and_vote_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("stake-and-vote-delegation-certificate", arguments)

    async def vote_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("vote-delegation-certificate", arguments)

    async def registration_and_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("registration-and-delegation-certificate", arguments)

    async def registration_and_vote_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("registration-and-vote-delegation-certificate", arguments)

    async def registration_stake_and_vote_delegation_certificate(self, arguments: Sequence[str]) -> str:
        return await self.execute("registration-stake-and-vote-delegation-certificate", arguments)
