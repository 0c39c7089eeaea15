"""``cardano-signer sign`` in its CIP modes."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from ...errors import InvalidParametersError
from ...validation_guards import require
from ..base import optional_flag, switch
from .base import SignerCommandGroup, SignerOutputFormat, data_arguments


class SignCommands(SignerCommandGroup):
    command = "sign"

    async def cip8(
        self,
        secret_key: str,
        address: str,
        *,
        data_hex: Optional[str] = None,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        no_hash_check: bool = False,
        hashed: bool = False,
        no_payload: bool = False,
        testnet_magic: Optional[int] = None,
        include_maps: bool = False,
        include_secret: bool = False,
        signature_only: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> str:
        """Sign a payload as COSE_Sign1 (CIP-8); exactly one data input is required."""
        return await self._cose_sign(
            "--cip8",
            secret_key,
            address,
            data_arguments(data_hex=data_hex, data_text=data_text, data_file=data_file),
            [
                *switch("--nohashcheck", no_hash_check),
                *switch("--hashed", hashed),
                *switch("--nopayload", no_payload),
                *switch("--include-maps", include_maps),
                *switch("--include-secret", include_secret),
                *switch("--signature-only", signature_only),
                *optional_flag("--testnet-magic", testnet_magic),
            ],
            output_format,
            out_file,
        )

    async def cip30(
        self,
        secret_key: str,
        address: str,
        *,
        data_hex: Optional[str] = None,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        no_hash_check: bool = False,
        hashed: bool = False,
        no_payload: bool = False,
        testnet_magic: Optional[int] = None,
        include_maps: bool = False,
        include_secret: bool = False,
        signature_only: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
    ) -> str:
        """Same as ``cip8`` with the CIP-30 wallet-compatible envelope."""
        return await self._cose_sign(
            "--cip30",
            secret_key,
            address,
            data_arguments(data_hex=data_hex, data_text=data_text, data_file=data_file),
            [
                *switch("--nohashcheck", no_hash_check),
                *switch("--hashed", hashed),
                *switch("--nopayload", no_payload),
                *switch("--include-maps", include_maps),
                *switch("--include-secret", include_secret),
                *switch("--signature-only", signature_only),
                *optional_flag("--testnet-magic", testnet_magic),
            ],
            output_format,
            out_file,
        )

    async def cip36(
        self,
        secret_key: str,
        *,
        vote_public_keys: Sequence[str] = (),
        vote_weights: Sequence[int] = (),
        payment_address: Optional[str] = None,
        nonce: Optional[int] = None,
        vote_purpose: int = 0,
        deregister: bool = False,
        testnet_magic: Optional[int] = None,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
        out_cbor: Optional[Path | str] = None,
    ) -> str:
        """
        Sign a Catalyst registration (or deregistration) in CIP-36 mode.

        Raises:
            InvalidParametersError: If a registration has no payment address
        """
        arguments: List[str] = ["--cip36"]
        if not deregister:
            require(
                payment_address is not None,
                InvalidParametersError("Payment address is required for CIP-36 registration"),
            )
            for key in vote_public_keys:
                arguments.extend(["--vote-public-key", key])
            for weight in vote_weights:
                arguments.extend(["--vote-weight", str(weight)])
            arguments.extend(["--payment-address", str(payment_address)])
        arguments.extend(["--secret-key", secret_key])
        arguments.extend(optional_flag("--nonce", nonce))
        if vote_purpose != 0:
            arguments.extend(["--vote-purpose", str(vote_purpose)])
        arguments.extend(switch("--deregister", deregister))
        arguments.extend(optional_flag("--testnet-magic", testnet_magic))
        arguments.extend(output_format.arguments)
        arguments.extend(optional_flag("--out-file", out_file))
        arguments.extend(optional_flag("--out-cbor", out_cbor))
        return await self.run(arguments)

    async def cip88(
        self,
        calidus_public_key: str,
        secret_key: str,
        *,
        nonce: Optional[int] = None,
        include_secret: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
        out_cbor: Optional[Path | str] = None,
    ) -> str:
        """Sign a Calidus pool key registration (CIP-88v2)."""
        arguments = [
            "--cip88",
            "--calidus-public-key",
            calidus_public_key,
            "--secret-key",
            secret_key,
            *optional_flag("--nonce", nonce),
            *switch("--include-secret", include_secret),
            *output_format.arguments,
            *optional_flag("--out-file", out_file),
            *optional_flag("--out-cbor", out_cbor),
        ]
        return await self.run(arguments)

    async def cip100(
        self,
        secret_key: str,
        author_name: str,
        *,
        data_text: Optional[str] = None,
        data_file: Optional[Path | str] = None,
        address: Optional[str] = None,
        replace: bool = False,
        disable_safe_mode: bool = False,
        out_file: Optional[Path | str] = None,
    ) -> str:
        """Add an author signature to governance JSON-LD metadata (CIP-100)."""
        arguments = [
            "--cip100",
            *data_arguments(data_text=data_text, data_file=data_file),
            "--secret-key",
            secret_key,
            "--author-name",
            author_name,
            *optional_flag("--address", address),
            *switch("--replace", replace),
            *switch("--disable-safemode", disable_safe_mode),
            *optional_flag("--out-file", out_file),
        ]
        return await self.run(arguments)

    async def _cose_sign(
        self,
        mode: str,
        secret_key: str,
        address: str,
        data: List[str],
        flags: List[str],
        output_format: SignerOutputFormat,
        out_file: Optional[Path | str],
    ) -> str:
        arguments = [
            mode,
            *data,
            "--secret-key",
            secret_key,
            "--address",
            address,
            *flags,
            *output_format.arguments,
            *optional_flag("--out-file", out_file),
        ]
        return await self.run(arguments)
