"""``cardano-hw-cli transaction`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ...config.network import DerivationType, Network
from ..base import CommandGroup, optional_flag
from .address import derivation_args


class HWTransactionCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["transaction"])

    async def policyid(
        self,
        script_file: Path | str,
        hw_signing_file: Optional[Path | str] = None,
        derivation_type: Optional[DerivationType] = None,
    ) -> str:
        arguments = [
            "--script-file",
            str(script_file),
            *optional_flag("--hw-signing-file", hw_signing_file),
            *derivation_args(derivation_type),
        ]
        return await self.execute("policyid", arguments)

    async def transform(self, tx_file: Path | str, out_file: Path | str) -> str:
        return await self.execute("transform", ["--tx-file", str(tx_file), "--out-file", str(out_file)])

    async def validate(self, tx_file: Path | str) -> str:
        return await self.execute("validate", ["--tx-file", str(tx_file)])

    async def witness(
        self,
        tx_file: Path | str,
        hw_signing_file: Path | str,
        out_file: Path | str,
        *,
        change_output_key_file: Optional[Path | str] = None,
        derivation_type: Optional[DerivationType] = None,
        network: Optional[Network] = None,
    ) -> str:
        """Witness *tx_file* on the device; network flags lead the argument list."""
        network_args = network.arguments if network is not None else self.network_args
        arguments = [
            *network_args,
            "--tx-file",
            str(tx_file),
            "--hw-signing-file",
            str(hw_signing_file),
            "--out-file",
            str(out_file),
            *optional_flag("--change-output-key-file", change_output_key_file),
            *derivation_args(derivation_type),
        ]
        return await self.execute("witness", arguments)
