"""``cardano-hw-cli vote`` commands (CIP-36 registration metadata)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from ...config.network import DerivationType, Network
from ...validation_guards import require_non_empty, require_same_length
from ..base import CommandGroup, optional_flag
from .address import derivation_args


class VoteKeySource(str, Enum):
    JCLI = "--vote-public-key-jcli"
    STRING = "--vote-public-key-string"
    HWS_FILE = "--vote-public-key-hwsfile"
    FILE = "--vote-public-key-file"


@dataclass(frozen=True)
class VotePublicKeyInput:
    source: VoteKeySource
    value: str

    @classmethod
    def jcli(cls, path: Path | str) -> "VotePublicKeyInput":
        return cls(VoteKeySource.JCLI, str(path))

    @classmethod
    def string(cls, public_key: str) -> "VotePublicKeyInput":
        return cls(VoteKeySource.STRING, public_key)

    @classmethod
    def hws_file(cls, path: Path | str) -> "VotePublicKeyInput":
        return cls(VoteKeySource.HWS_FILE, str(path))

    @classmethod
    def file(cls, path: Path | str) -> "VotePublicKeyInput":
        return cls(VoteKeySource.FILE, str(path))

    @property
    def arguments(self) -> List[str]:
        return [self.source.value, self.value]


class HWVoteCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["vote"])

    async def registration_metadata(
        self,
        vote_public_keys: Sequence[VotePublicKeyInput],
        vote_weights: Sequence[int],
        stake_signing_key_hws_file: Path | str,
        payment_address: str,
        nonce: int,
        metadata_cbor_out_file: Path | str,
        *,
        network: Network = Network.MAINNET,
        voting_purpose: Optional[str] = None,
        payment_address_signing_key_hws_file: Optional[Path | str] = None,
        derivation_type: Optional[DerivationType] = None,
    ) -> str:
        """
        Build vote registration metadata.

        Each public key is paired with the weight at the same position.

        Raises:
            InvalidParametersError: If keys and weights differ in length or no key is given
        """
        require_same_length(vote_public_keys, vote_weights, "vote public keys", "vote weights")
        require_non_empty(vote_public_keys, "vote public keys")

        arguments: List[str] = [*network.arguments]
        for key, weight in zip(vote_public_keys, vote_weights):
            arguments.extend(key.arguments)
            arguments.extend(["--vote-weight", str(weight)])
        arguments.extend(
            [
                "--stake-signing-key-hwsfile",
                str(stake_signing_key_hws_file),
                "--payment-address",
                payment_address,
                "--nonce",
                str(nonce),
                "--metadata-cbor-out-file",
                str(metadata_cbor_out_file),
                *optional_flag("--voting-purpose", voting_purpose),
                *optional_flag("--payment-address-signing-key-hwsfile", payment_address_signing_key_hws_file),
                *derivation_args(derivation_type),
            ]
        )
        return await self.execute("registration-metadata", arguments)
