"""``mithril-client`` stake distribution commands."""

from __future__ import annotations

from typing import Sequence

from .base import MithrilCommandGroup


class MithrilStakeDistributionCommands(MithrilCommandGroup):
    noun = "mithril-stake-distribution"

    async def list(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute("list", arguments)

    async def download(self, artifact_hash: str, arguments: Sequence[str] = ()) -> str:
        return await self.execute("download", [artifact_hash, *arguments])


class CardanoStakeDistributionCommands(MithrilCommandGroup):
    noun = "cardano-stake-distribution"

    async def list(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute("list", arguments)
