"""``mithril-client tools`` commands; these run offline."""

from __future__ import annotations

from typing import Optional, Sequence

from ..base import optional_flag
from .base import MithrilCommandGroup


class ToolsCommands(MithrilCommandGroup):
    noun = "tools"

    async def utxo_hd_snapshot_converter(
        self,
        input_format: Optional[str] = None,
        output_format: Optional[str] = None,
        snapshot_path: Optional[str] = None,
        arguments: Sequence[str] = (),
    ) -> str:
        args = [
            "snapshot-converter",
            *optional_flag("--input-format", input_format),
            *optional_flag("--output-format", output_format),
            *optional_flag("--snapshot-path", snapshot_path),
            *arguments,
        ]
        return await self.execute_raw("utxo-hd", args)
