"""cardano-hw-cli command groups."""

from .address import HWAddressCommands
from .device import HWDeviceCommands
from .key import HWKeyCommands
from .node import HWNodeCommands
from .transaction import HWTransactionCommands
from .vote import HWVoteCommands, VoteKeySource, VotePublicKeyInput

__all__ = [
    "HWAddressCommands",
    "HWDeviceCommands",
    "HWKeyCommands",
    "HWNodeCommands",
    "HWTransactionCommands",
    "HWVoteCommands",
    "VoteKeySource",
    "VotePublicKeyInput",
]
