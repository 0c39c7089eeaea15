"""``cardano-cli <era> genesis`` commands."""

from typing import Sequence

from ..base import EraCommandGroup


class GenesisCommands(EraCommandGroup):
    noun = "genesis"

    async def key_gen_genesis(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-gen-genesis", arguments)

    async def key_gen_delegate(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-gen-delegate", arguments)

    async def key_gen_utxo(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-gen-utxo", arguments)

    async def key_hash(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-hash", arguments)

    async def get_ver_key(self, arguments: Sequence[str]) -> str:
        return await self.execute("get-ver-key", arguments)

    async def initial_addr(self, arguments: Sequence[str]) -> str:
        return await self.execute("initial-addr", arguments)

    async def initial_txin(self, arguments: Sequence[str]) -> str:
        return await self.execute("initial-txin", arguments)

    async def create_cardano(self, arguments: Sequence[str]) -> str:
        return await self.execute("create-cardano", arguments)

    async def create(self, arguments: Sequence[str]) -> str:
        return await self.execute("create", arguments)

    async def create_staked(self, arguments: Sequence[str]) -> str:
        return await self.execute("create-staked", arguments)

    async def create_testnet_data(self, arguments: Sequence[str]) -> str:
        return await self.execute("create-testnet-data", arguments)

    async def hash(self, arguments: Sequence[str]) -> str:
        return await self.execute("hash", arguments)
