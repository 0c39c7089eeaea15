"""One wrapper per external binary."""

from .base import BinaryWrapper, SupervisedBinary, SupportsCommands, SupportsSupervision, VersionedExecutable
from .cardano_cli import CardanoCLI
from .cardano_hw_cli import CardanoHWCLI
from .cardano_node import CardanoNode
from .cardano_signer import CardanoSigner
from .kupo import Kupo
from .mithril_client import MithrilClient
from .ogmios import Ogmios

__all__ = [
    "BinaryWrapper",
    "CardanoCLI",
    "CardanoHWCLI",
    "CardanoNode",
    "CardanoSigner",
    "Kupo",
    "MithrilClient",
    "Ogmios",
    "SupervisedBinary",
    "SupportsCommands",
    "SupportsSupervision",
    "VersionedExecutable",
]
