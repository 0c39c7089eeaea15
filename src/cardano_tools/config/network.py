"""Network and era selectors passed to the wrapped binaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union

_KNOWN_MAGICS: Dict[str, Optional[int]] = {
    "mainnet": None,
    "preprod": 1,
    "preview": 2,
    "guildnet": 141,
    "sanchonet": 4,
}


@dataclass(frozen=True)
class Network:
    """
    A Cardano network selection.

    Named networks carry their well-known testnet magic; any other magic is a
    custom network. Mainnet is the only network without a magic.
    """

    name: str
    magic: Optional[int] = None

    MAINNET: ClassVar["Network"]
    PREPROD: ClassVar["Network"]
    PREVIEW: ClassVar["Network"]
    GUILDNET: ClassVar["Network"]
    SANCHONET: ClassVar["Network"]

    @classmethod
    def custom(cls, magic: int) -> "Network":
        return cls(name="custom", magic=int(magic))

    @classmethod
    def parse(cls, value: Union[str, int, "Network", None]) -> "Network":
        """
        Parse a network name or testnet magic.

        Unknown names fall back to mainnet; numeric values become custom networks.
        """
        if isinstance(value, Network):
            return value
        if value is None:
            return cls.MAINNET
        if isinstance(value, bool):
            raise TypeError("network must be a name or an integer magic")
        if isinstance(value, int):
            return cls.custom(value)

        lowered = value.strip().lower()
        if lowered in _KNOWN_MAGICS:
            return cls(name=lowered, magic=_KNOWN_MAGICS[lowered])
        try:
            return cls.custom(int(lowered))
        except ValueError:
            return cls.MAINNET

    @property
    def is_mainnet(self) -> bool:
        return self.magic is None

    @property
    def testnet_magic(self) -> Optional[int]:
        return self.magic

    @property
    def arguments(self) -> List[str]:
        """Command line flags selecting this network."""
        if self.magic is None:
            return ["--mainnet"]
        return ["--testnet-magic", str(self.magic)]

    def to_json(self) -> Union[str, int]:
        if self.name == "custom":
            return int(self.magic)  # type: ignore[arg-type]
        return self.name

    def __str__(self) -> str:
        if self.name == "custom":
            return f"custom({self.magic})"
        return self.name


Network.MAINNET = Network("mainnet")
Network.PREPROD = Network("preprod", 1)
Network.PREVIEW = Network("preview", 2)
Network.GUILDNET = Network("guildnet", 141)
Network.SANCHONET = Network("sanchonet", 4)


class Era(str, Enum):
    """Ledger eras accepted as the leading cardano-cli command group."""

    BYRON = "byron"
    SHELLEY = "shelley"
    ALLEGRA = "allegra"
    MARY = "mary"
    ALONZO = "alonzo"
    BABBAGE = "babbage"
    CONWAY = "conway"

    @classmethod
    def parse(cls, value: Union[str, "Era", None]) -> "Era":
        if isinstance(value, Era):
            return value
        if value is None or not value.strip():
            return cls.CONWAY
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown era: {value!r}") from exc


class HardwareWalletType(str, Enum):
    LEDGER = "LEDGER"
    TREZOR = "TREZOR"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class DerivationType(str, Enum):
    LEDGER = "LEDGER"
    ICARUS = "ICARUS"
    ICARUS_TREZOR = "ICARUS_TREZOR"


__all__ = ["DerivationType", "Era", "HardwareWalletType", "Network"]
