"""Environment-backed runtime helpers and typed settings."""

from .errors import ConfigurationError
from .network import DerivationType, Era, HardwareWalletType, Network
from .runtime import (
    env_bool,
    env_int,
    env_list,
    env_path,
    env_str,
)
from .settings import (
    CardanoSettings,
    KupoSettings,
    MithrilSettings,
    OgmiosSettings,
    ToolSettings,
)

__all__ = [
    "CardanoSettings",
    "ConfigurationError",
    "DerivationType",
    "Era",
    "HardwareWalletType",
    "KupoSettings",
    "MithrilSettings",
    "Network",
    "OgmiosSettings",
    "ToolSettings",
    "env_bool",
    "env_int",
    "env_list",
    "env_path",
    "env_str",
]
