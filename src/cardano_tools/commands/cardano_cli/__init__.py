"""cardano-cli command groups."""

from .address import AddressCommands
from .debug import DebugCommands
from .genesis import GenesisCommands
from .governance import GovernanceCommands
from .hash import HashCommands
from .key import KeyCommands
from .legacy import LegacyCommands
from .node import NodeCommands
from .query import QueryCommands
from .stake_address import StakeAddressCommands
from .stake_pool import StakePoolCommands
from .text_view import TextViewCommands
from .transaction import TransactionCommands

__all__ = [
    "AddressCommands",
    "DebugCommands",
    "GenesisCommands",
    "GovernanceCommands",
    "HashCommands",
    "KeyCommands",
    "LegacyCommands",
    "NodeCommands",
    "QueryCommands",
    "StakeAddressCommands",
    "StakePoolCommands",
    "TextViewCommands",
    "TransactionCommands",
]
