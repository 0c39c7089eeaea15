"""
``cardano-signer verify``.

Every mode returns a boolean. cardano-signer exits non-zero when a
signature does not verify, so a failed run reads as ``False``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from ...errors import CommandFailedError
from ..base import optional_flag, switch
from .base import SignerCommandGroup, SignerOutputFormat, data_arguments, parse_verdict

logger = logging.getLogger(__name__)


class VerifyCommands(SignerCommandGroup):
    command = "verify"

    async def cip8(
        self,
        cose_sign1: str,
        cose_key: str,
        *,
        data_hex: Optional[str] = None,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        address: Optional[str] = None,
        no_hash_check: bool = False,
        include_maps: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> bool:
        return await self._cose_verify(
            "--cip8",
            cose_sign1,
            cose_key,
            data_arguments(required=False, data_hex=data_hex, data_text=data_text, data_file=data_file),
            address,
            no_hash_check,
            include_maps,
            output_format,
            out_file,
        )

    async def cip30(
        self,
        cose_sign1: str,
        cose_key: str,
        *,
        data_hex: Optional[str] = None,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        address: Optional[str] = None,
        no_hash_check: bool = False,
        include_maps: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> bool:
        return await self._cose_verify(
            "--cip30",
            cose_sign1,
            cose_key,
            data_arguments(required=False, data_hex=data_hex, data_text=data_text, data_file=data_file),
            address,
            no_hash_check,
            include_maps,
            output_format,
            out_file,
        )

    async def cip88(
        self,
        *,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        data_hex: Optional[str] = None,
        include_maps: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> bool:
        """Verify Calidus pool key registration data; exactly one data input is required."""
        arguments = [
            "--cip88",
            *data_arguments(data_hex=data_hex, data_text=data_text, data_file=data_file),
            *switch("--include-maps", include_maps),
            *output_format.arguments,
            *optional_flag("--out-file", out_file),
        ]
        return await self._verdict(arguments)

    async def cip100(
        self,
        *,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        disable_safe_mode: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> bool:
        """Verify the author signatures in governance JSON-LD metadata."""
        arguments = [
            "--cip100",
            *data_arguments(data_text=data_text, data_file=data_file),
            *switch("--disable-safemode", disable_safe_mode),
            *output_format.arguments,
            *optional_flag("--out-file", out_file),
        ]
        return await self._verdict(arguments)

    async def _cose_verify(
        self,
        mode: str,
        cose_sign1: str,
        cose_key: str,
        data: Sequence[str],
        address: Optional[str],
        no_hash_check: bool,
        include_maps: bool,
        output_format: SignerOutputFormat,
        out_file: Optional[Path | str],
    ) -> bool:
        arguments = [
            mode,
            "--cose-sign1",
            cose_sign1,
            "--cose-key",
            cose_key,
            *data,
            *optional_flag("--address", address),
            *switch("--nohashcheck", no_hash_check),
            *switch("--include-maps", include_maps),
            *output_format.arguments,
            *optional_flag("--out-file", out_file),
        ]
        return await self._verdict(arguments)

    async def _verdict(self, arguments: Sequence[str]) -> bool:
        try:
            output = await self.run(arguments)
        except CommandFailedError as exc:
            logger.debug("cardano-signer verify rejected the input: %s", exc.detail)
            return False
        return parse_verdict(output)
