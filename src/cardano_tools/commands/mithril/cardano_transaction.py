"""``mithril-client cardano-transaction`` commands."""

from __future__ import annotations

from typing import List, Sequence

from ...validation_guards import require_non_empty
from .base import MithrilCommandGroup


class CardanoTransactionCommands(MithrilCommandGroup):
    noun = "cardano-transaction"

    async def snapshot_list(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute("snapshot", ["list", *arguments])

    async def snapshot_show(self, snapshot_hash: str, arguments: Sequence[str] = ()) -> str:
        return await self.execute("snapshot", ["show", snapshot_hash, *arguments])

    async def certify(self, transaction_hashes: Sequence[str], arguments: Sequence[str] = ()) -> str:
        require_non_empty(transaction_hashes, "transaction hashes")
        args: List[str] = []
        for tx_hash in transaction_hashes:
            args.extend(["--transaction-hash", tx_hash])
        args.extend(arguments)
        return await self.execute("certify", args)
