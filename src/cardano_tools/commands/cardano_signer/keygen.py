"""``cardano-signer keygen``."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..base import optional_flag, switch
from .base import SignerCommandGroup, SignerOutputFormat


class SignerDerivation(str, Enum):
    LEDGER = "ledger"
    TREZOR = "trezor"
    BYRON = "byron"
    YOROI = "yoroi"
    EXODUS = "exodus"
    EXODUS_STAKE = "exodus-stake"

    @property
    def arguments(self) -> List[str]:
        return [f"--{self.value}"]


class KeyGenCommands(SignerCommandGroup):
    command = "keygen"

    async def generate(
        self,
        *,
        path: Optional[str] = None,
        mnemonics: Optional[str | Path] = None,
        passphrase: Optional[str] = None,
        derivation: Optional[SignerDerivation] = None,
        address: Optional[str] = None,
        cip36: bool = False,
        vote_purpose: Optional[int] = None,
        vkey_extended: bool = False,
        with_chain_code: bool = False,
        output_format: SignerOutputFormat = SignerOutputFormat.HEX,
        out_file: Optional[Path | str] = None,
        out_skey: Optional[Path | str] = None,
        out_vkey: Optional[Path | str] = None,
        out_id: Optional[Path | str] = None,
        out_mnemonics: Optional[Path | str] = None,
        out_addr: Optional[Path | str] = None,
    ) -> str:
        """
        Generate ed25519 or ed25519-extended keys, optionally derived from mnemonics.

        *path* is a derivation path or one of cardano-signer's named paths
        (``payment``, ``drep``, ``pool``...). *mnemonics* is either the words
        or a file holding them. *vote_purpose* is only sent with *cip36*.
        """
        arguments = [
            *optional_flag("--path", path),
            *optional_flag("--mnemonics", mnemonics),
            *optional_flag("--passphrase", passphrase),
            *(derivation.arguments if derivation is not None else []),
            *optional_flag("--address", address),
        ]
        if cip36:
            arguments.append("--cip36")
            arguments.extend(optional_flag("--vote-purpose", vote_purpose))
        arguments.extend(switch("--vkey-extended", vkey_extended))
        arguments.extend(switch("--with-chain-code", with_chain_code))
        arguments.extend(output_format.arguments)
        for flag, value in (
            ("--out-file", out_file),
            ("--out-skey", out_skey),
            ("--out-vkey", out_vkey),
            ("--out-id", out_id),
            ("--out-mnemonics", out_mnemonics),
            ("--out-addr", out_addr),
        ):
            arguments.extend(optional_flag(flag, value))
        return await self.run(arguments)
