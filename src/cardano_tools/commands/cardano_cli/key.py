"""``cardano-cli <era> key`` commands."""

from typing import Sequence

from ..base import EraCommandGroup


class KeyCommands(EraCommandGroup):
    noun = "key"

    async def verification_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("verification-key", arguments)

    async def non_extended_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("non-extended-key", arguments)

    async def convert_byron_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-byron-key", arguments)

    async def convert_byron_genesis_vkey(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-byron-genesis-vkey", arguments)

    async def convert_itn_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-itn-key", arguments)

    async def convert_itn_extended_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-itn-extended-key", arguments)

    async def convert_itn_bip32_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-itn-bip32-key", arguments)

    async def convert_cardano_address_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("convert-cardano-address-key", arguments)
