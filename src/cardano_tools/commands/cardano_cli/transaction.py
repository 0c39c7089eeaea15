"""``cardano-cli <era> transaction`` commands."""

from typing import Sequence

from ..base import EraCommandGroup, parse_int_token


class TransactionCommands(EraCommandGroup):
    noun = "transaction"

    async def assemble(self, arguments: Sequence[str]) -> str:
        return await self.execute("assemble", arguments)

    async def build(self, arguments: Sequence[str]) -> int:
        """Build a balanced transaction and return the fee cardano-cli reports (last token)."""
        return parse_int_token(await self.execute_with_network("build", arguments))

    async def build_estimate(self, arguments: Sequence[str]) -> str:
        return await self.execute("build-estimate", arguments)

    async def build_raw(self, arguments: Sequence[str]) -> str:
        return await self.execute("build-raw", arguments)

    async def calculate_min_fee(self, arguments: Sequence[str]) -> int:
        # output is "<fee> Lovelace"
        return parse_int_token(await self.execute_with_network("calculate-min-fee", arguments), last=False)

    async def calculate_min_required_utxo(self, arguments: Sequence[str]) -> int:
        return parse_int_token(await self.execute("calculate-min-required-utxo", arguments))

    async def hash_script_data(self, arguments: Sequence[str]) -> str:
        return await self.execute("hash-script-data", arguments)

    async def sign(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("sign", arguments)

    async def witness(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("witness", arguments)

    async def submit(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("submit", arguments)

    async def txid(self, arguments: Sequence[str]) -> str:
        return await self.execute("txid", arguments)

    async def transform(self, arguments: Sequence[str]) -> str:
        return await self.execute("transform", arguments)

    async def policyid(self, arguments: Sequence[str]) -> str:
        return await self.execute("policyid", arguments)

    async def view(self, arguments: Sequence[str]) -> str:
        return await self.execute("view", arguments)
