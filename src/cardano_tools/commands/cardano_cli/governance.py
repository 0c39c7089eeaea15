"""
``cardano-cli <era> governance`` commands.

The four sub-nouns (``action``, ``committee``, ``drep``, ``vote``) are exposed
as pass-through calls; the remaining methods pin the common leaf command.
Identifiers and hashes come back stripped.
"""

from typing import Sequence

from ..base import EraCommandGroup


class GovernanceCommands(EraCommandGroup):
    noun = "governance"

    async def action(self, arguments: Sequence[str]) -> str:
        return await self.execute("action", arguments)

    async def committee(self, arguments: Sequence[str]) -> str:
        return await self.execute("committee", arguments)

    async def drep(self, arguments: Sequence[str]) -> str:
        return await self.execute("drep", arguments)

    async def vote(self, arguments: Sequence[str]) -> str:
        return await self.execute("vote", arguments)

    async def drep_key_gen(self, arguments: Sequence[str]) -> str:
        return await self.drep(["key-gen", *arguments])

    async def drep_id(self, arguments: Sequence[str]) -> str:
        return (await self.drep(["id", *arguments])).strip()

    async def drep_registration_certificate(self, arguments: Sequence[str]) -> str:
        return await self.drep(["registration-certificate", *arguments])

    async def drep_retirement_certificate(self, arguments: Sequence[str]) -> str:
        return await self.drep(["retirement-certificate", *arguments])

    async def drep_update_certificate(self, arguments: Sequence[str]) -> str:
        return await self.drep(["update-certificate", *arguments])

    async def drep_metadata_hash(self, arguments: Sequence[str]) -> str:
        return (await self.drep(["metadata-hash", *arguments])).strip()

    async def committee_key_hash(self, arguments: Sequence[str]) -> str:
        return (await self.committee(["key-hash", *arguments])).strip()

    async def committee_key_gen_cold(self, arguments: Sequence[str]) -> str:
        return await self.committee(["key-gen-cold", *arguments])

    async def committee_key_gen_hot(self, arguments: Sequence[str]) -> str:
        return await self.committee(["key-gen-hot", *arguments])

    async def committee_hot_key_authorization(self, arguments: Sequence[str]) -> str:
        return await self.committee(["create-hot-key-authorization-certificate", *arguments])

    async def committee_resignation(self, arguments: Sequence[str]) -> str:
        return await self.committee(["create-hot-key-resignation-certificate", *arguments])

    async def create_vote(self, arguments: Sequence[str]) -> str:
        return await self.vote(["create", *arguments])

    async def view_vote(self, arguments: Sequence[str]) -> str:
        return await self.vote(["view", *arguments])
