"""Typed views over JSON printed by the wrapped binaries."""

from .chain_tip import ChainTip
from .stake_address_info import StakeAddressInfo

__all__ = ["ChainTip", "StakeAddressInfo"]
