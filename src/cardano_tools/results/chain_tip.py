"""Decoded ``cardano-cli query tip`` output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import orjson

from ..errors import InvalidOutputError


@dataclass(frozen=True)
class ChainTip:
    block: int
    epoch: int
    era: str
    hash: str
    slot: int
    slot_in_epoch: int
    slots_to_epoch_end: int
    sync_progress: str

    @property
    def sync_percentage(self) -> float:
        return float(self.sync_progress)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChainTip":
        try:
            return cls(
                block=int(data["block"]),
                epoch=int(data["epoch"]),
                era=str(data["era"]),
                hash=str(data["hash"]),
                slot=int(data["slot"]),
                slot_in_epoch=int(data["slotInEpoch"]),
                slots_to_epoch_end=int(data["slotsToEpochEnd"]),
                sync_progress=str(data["syncProgress"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidOutputError(f"Malformed chain tip: {exc}") from exc

    @classmethod
    def from_json(cls, payload: bytes | str) -> "ChainTip":
        try:
            data = orjson.loads(payload)
        except orjson.JSONDecodeError as exc:
            raise InvalidOutputError(f"Chain tip is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise InvalidOutputError("Chain tip must be a JSON object")
        return cls.from_dict(data)


__all__ = ["ChainTip"]
