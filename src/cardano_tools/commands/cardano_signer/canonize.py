"""``cardano-signer canonize`` (CIP-100 JSON-LD body hashing)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..base import optional_flag, switch
from .base import SignerCommandGroup, SignerOutputFormat, data_arguments


class CanonizeCommands(SignerCommandGroup):
    command = "canonize"

    async def cip100(
        self,
        *,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        disable_safe_mode: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_canonized: Optional[Path | str] = None,
        out_file: Optional[Path | str] = None,
    ) -> str:
        """Return the hash of the canonized body (not the anchor url hash)."""
        arguments = [
            "--cip100",
            *data_arguments(data_text=data_text, data_file=data_file),
            *switch("--disable-safemode", disable_safe_mode),
            *output_format.arguments,
            *optional_flag("--out-canonized", out_canonized),
            *optional_flag("--out-file", out_file),
        ]
        return await self.run(arguments)
