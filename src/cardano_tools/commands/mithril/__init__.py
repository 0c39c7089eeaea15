"""mithril-client command groups."""

from .base import MithrilCommandGroup
from .cardano_db import CardanoDbCommands
from .cardano_transaction import CardanoTransactionCommands
from .stake_distribution import CardanoStakeDistributionCommands, MithrilStakeDistributionCommands
from .tools import ToolsCommands

__all__ = [
    "CardanoDbCommands",
    "CardanoStakeDistributionCommands",
    "CardanoTransactionCommands",
    "MithrilCommandGroup",
    "MithrilStakeDistributionCommands",
    "ToolsCommands",
]
