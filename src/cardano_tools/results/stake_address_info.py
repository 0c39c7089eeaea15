"""Decoded ``cardano-cli query stake-address-info`` entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import orjson

from ..errors import InvalidOutputError


@dataclass(frozen=True)
class StakeAddressInfo:
    """
    Registration and delegation state of one stake address.

    ``stake_delegation`` is the bech32 pool id and ``vote_delegation`` the DRep
    identifier exactly as cardano-cli prints them; neither is interpreted.
    """

    address: str
    reward_account_balance: int = 0
    gov_action_deposits: Optional[Dict[str, int]] = None
    stake_delegation: Optional[str] = None
    stake_registration_deposit: Optional[int] = None
    vote_delegation: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StakeAddressInfo":
        if "address" not in data:
            raise InvalidOutputError("Stake address info is missing 'address'")
        deposits = data.get("govActionDeposits")
        registration_deposit = data.get("stakeRegistrationDeposit")
        try:
            return cls(
                address=str(data["address"]),
                reward_account_balance=int(data.get("rewardAccountBalance") or 0),
                gov_action_deposits={str(k): int(v) for k, v in deposits.items()} if deposits else None,
                stake_delegation=data.get("stakeDelegation"),
                stake_registration_deposit=int(registration_deposit) if registration_deposit is not None else None,
                vote_delegation=data.get("voteDelegation"),
            )
        except (AttributeError, TypeError, ValueError) as exc:
            raise InvalidOutputError(f"Malformed stake address info: {exc}") from exc

    @classmethod
    def list_from_json(cls, payload: bytes | str) -> List["StakeAddressInfo"]:
        """Decode the JSON array printed by ``query stake-address-info``."""
        try:
            data = orjson.loads(payload)
        except orjson.JSONDecodeError as exc:
            raise InvalidOutputError(f"Stake address info is not valid JSON: {exc}") from exc
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise InvalidOutputError("Stake address info must be a JSON array")
        return [cls.from_dict(item) for item in data]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "govActionDeposits": self.gov_action_deposits,
            "rewardAccountBalance": self.reward_account_balance,
            "stakeDelegation": self.stake_delegation,
            "stakeRegistrationDeposit": self.stake_registration_deposit,
            "voteDelegation": self.vote_delegation,
        }


__all__ = ["StakeAddressInfo"]
