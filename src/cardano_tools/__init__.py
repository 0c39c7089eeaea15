"""Locate, run and supervise the Cardano command-line binaries from asyncio code."""

from .binaries import CardanoCLI, CardanoHWCLI, CardanoNode, CardanoSigner, Kupo, MithrilClient, Ogmios
from .config import (
    CardanoSettings,
    Era,
    KupoSettings,
    MithrilSettings,
    Network,
    OgmiosSettings,
    ToolSettings,
)
from .errors import (
    BinaryNotFoundError,
    CardanoToolsError,
    CommandFailedError,
    ConfigurationMissingError,
    DeviceError,
    FileAlreadyExistsError,
    InvalidOutputError,
    InvalidParametersError,
    MissingFileError,
    NodeNotSyncedError,
    ProcessAlreadyRunningError,
    UnsupportedVersionError,
)
from .logging_config import setup_logging
from .process import CommandRunner, SupervisedProcess, locate_binary, validate_binary
from .results import ChainTip, StakeAddressInfo
from .version_gate import check_version, compare_versions

__version__ = "0.1.0"

__all__ = [
    "BinaryNotFoundError",
    "CardanoCLI",
    "CardanoHWCLI",
    "CardanoNode",
    "CardanoSettings",
    "CardanoSigner",
    "CardanoToolsError",
    "ChainTip",
    "CommandFailedError",
    "CommandRunner",
    "ConfigurationMissingError",
    "DeviceError",
    "Era",
    "FileAlreadyExistsError",
    "InvalidOutputError",
    "InvalidParametersError",
    "Kupo",
    "KupoSettings",
    "MissingFileError",
    "MithrilClient",
    "MithrilSettings",
    "Network",
    "NodeNotSyncedError",
    "Ogmios",
    "OgmiosSettings",
    "ProcessAlreadyRunningError",
    "StakeAddressInfo",
    "SupervisedProcess",
    "ToolSettings",
    "UnsupportedVersionError",
    "check_version",
    "compare_versions",
    "locate_binary",
    "setup_logging",
    "validate_binary",
]
