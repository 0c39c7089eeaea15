"""``cardano-cli <era> text-view`` commands."""

from typing import Sequence

from ..base import EraCommandGroup


class TextViewCommands(EraCommandGroup):
    noun = "text-view"

    async def decode_cbor(self, arguments: Sequence[str]) -> str:
        return await self.execute("decode-cbor", arguments)
