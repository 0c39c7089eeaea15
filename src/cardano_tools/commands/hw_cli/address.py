"""``cardano-hw-cli address`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ...config.network import DerivationType
from ...validation_guards import require_exactly_one
from ..base import CommandGroup, optional_flag


def derivation_args(derivation_type: Optional[DerivationType]) -> List[str]:
    if derivation_type is None:
        return []
    return ["--derivation-type", DerivationType(derivation_type).value]


class HWAddressCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["address"])

    async def key_gen(
        self,
        path: str,
        hw_signing_file: Path | str,
        verification_key_file: Path | str,
        derivation_type: Optional[DerivationType] = None,
    ) -> str:
        arguments = [
            "--path",
            path,
            "--hw-signing-file",
            str(hw_signing_file),
            "--verification-key-file",
            str(verification_key_file),
            *derivation_args(derivation_type),
        ]
        return await self.execute("key-gen", arguments)

    async def show(
        self,
        address_file: Path | str,
        *,
        payment_path: Optional[str] = None,
        payment_script_hash: Optional[str] = None,
        staking_path: Optional[str] = None,
        staking_script_hash: Optional[str] = None,
        derivation_type: Optional[DerivationType] = None,
    ) -> str:
        """
        Show an address on the device.

        Exactly one payment credential (path or script hash) and exactly one
        staking credential must be given; violations fail before anything runs.

        Raises:
            InvalidParametersError: If either credential pair is ambiguous or missing
        """
        require_exactly_one(payment_path=payment_path, payment_script_hash=payment_script_hash)
        require_exactly_one(staking_path=staking_path, staking_script_hash=staking_script_hash)

        arguments = [
            *optional_flag("--payment-path", payment_path),
            *optional_flag("--payment-script-hash", payment_script_hash),
            *optional_flag("--staking-path", staking_path),
            *optional_flag("--staking-script-hash", staking_script_hash),
            "--address-file",
            str(address_file),
            *derivation_args(derivation_type),
        ]
        return await self.execute("show", arguments)
