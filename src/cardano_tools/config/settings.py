"""
Typed, immutable settings for every wrapped binary.

Settings are built once, either from a JSON document overlaid with
environment variables (``ToolSettings.load``) or from the fixed set of
deployment environment variables (``ToolSettings.from_environment``), and
then passed down to the wrappers. Nothing below the settings layer reads
the process environment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, TypeVar

import orjson

from ..errors import FileAlreadyExistsError, MissingFileError
from .errors import ConfigurationError
from .network import Era, Network
from .runtime import env_bool, env_int, env_list, env_path, env_str, parse_bool, split_list
from .runtime_helpers import JsonConfigLoader

logger = logging.getLogger(__name__)

S = TypeVar("S")

_PATH = "path"
_INT = "int"
_BOOL = "bool"
_STR = "str"
_LIST = "list"
_NETWORK = "network"
_ERA = "era"


def _kind(kind: str, default: Any = None) -> Any:
    return field(default=default, metadata={"kind": kind})


def _coerce_path(name: str, value: Any) -> Path:
    if not isinstance(value, (str, Path)) or str(value).strip() == "":
        raise ConfigurationError.invalid_value(name, value, "Expected a non-empty path string")
    return Path(str(value)).expanduser()


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError.invalid_value(name, value, "Expected an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError.invalid_value(name, value, "Expected an integer") from exc


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value, name)
    raise ConfigurationError.invalid_value(name, value, "Expected a boolean")


def _coerce_str(name: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise ConfigurationError.invalid_value(name, value, "Expected a string")
    return str(value)


def _coerce_list(name: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return split_list(value)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ConfigurationError.invalid_value(name, value, "Expected a list of strings")


def _coerce_era(name: str, value: Any) -> Era:
    try:
        return Era.parse(value)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, value, str(exc)) from exc


_COERCERS: Dict[str, Callable[[str, Any], Any]] = {
    _PATH: _coerce_path,
    _INT: _coerce_int,
    _BOOL: _coerce_bool,
    _STR: _coerce_str,
    _LIST: _coerce_list,
    _NETWORK: lambda _name, value: Network.parse(value),
    _ERA: _coerce_era,
}


def _section_from_mapping(cls: Type[S], section: str, data: Mapping[str, Any]) -> S:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"'{section}' section must be a JSON object")
    known = {f.name: f for f in fields(cls)}  # type: ignore[arg-type]
    unknown = set(data) - set(known)
    if unknown:
        logger.debug("Ignoring unknown %s settings keys: %s", section, ", ".join(sorted(unknown)))

    values: Dict[str, Any] = {}
    for name, spec in known.items():
        if name not in data or data[name] is None:
            continue
        coerce = _COERCERS[spec.metadata["kind"]]
        values[name] = coerce(f"{section}.{name}", data[name])
    return cls(**values)


# Deployment variable names that do not follow <SECTION>_<FIELD>.
_ENV_ALIASES: Dict[str, Dict[str, str]] = {
    "cardano": {
        "socket": "CARDANO_SOCKET_PATH",
        "database": "CARDANO_DATABASE_PATH",
        "host_addr": "CARDANO_BIND_ADDR",
        "network": "NETWORK",
    },
    "mithril": {
        "aggregator_endpoint": "AGGREGATOR_ENDPOINT",
        "genesis_verification_key": "GENESIS_VERIFICATION_KEY",
        "ancillary_verification_key": "ANCILLARY_VERIFICATION_KEY",
    },
}


def _env_names(section: str, field_name: str) -> Tuple[str, ...]:
    generated = f"{section.upper()}_{field_name.upper()}"
    alias = _ENV_ALIASES.get(section, {}).get(field_name)
    if alias is None or alias == generated:
        return (generated,)
    return (alias, generated)


def _env_override(kind: str, name: str) -> Any:
    if kind == _LIST:
        return env_list(name)
    raw = env_str(name)
    if raw is None:
        return None
    return _COERCERS[kind](name, raw)


def _section_from_env(cls: Type[S], section: str, base: S) -> S:
    """
    Overlay environment variables onto *base*.

    Each field is read from its deployment name when it has one (``CARDANO_SOCKET_PATH``,
    ``NETWORK``), then from ``<SECTION>_<FIELD>``; the first one set wins.
    """
    overrides: Dict[str, Any] = {}
    for spec in fields(cls):  # type: ignore[arg-type]
        for name in _env_names(section, spec.name):
            value = _env_override(spec.metadata["kind"], name)
            if value is not None:
                overrides[spec.name] = value
                break
    if not overrides:
        return base
    return replace(base, **overrides)  # type: ignore[type-var]


def _section_to_json(instance: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for spec in fields(instance):
        value = getattr(instance, spec.name)
        if value is None:
            payload[spec.name] = None
        elif isinstance(value, Path):
            payload[spec.name] = str(value)
        elif isinstance(value, Network):
            payload[spec.name] = value.to_json()
        elif isinstance(value, Era):
            payload[spec.name] = value.value
        elif isinstance(value, tuple):
            payload[spec.name] = list(value)
        else:
            payload[spec.name] = value
    return payload


def _locate_or_none(binary_name: str) -> Optional[Path]:
    from ..process.locator import locate_binary
    from ..errors import BinaryNotFoundError

    try:
        return locate_binary(binary_name)
    except BinaryNotFoundError:
        logger.debug("%s not found on PATH", binary_name)
        return None


@dataclass(frozen=True)
class CardanoSettings:
    cli: Optional[Path] = _kind(_PATH)
    node: Optional[Path] = _kind(_PATH)
    hw_cli: Optional[Path] = _kind(_PATH)
    signer: Optional[Path] = _kind(_PATH)
    socket: Optional[Path] = _kind(_PATH)
    config: Optional[Path] = _kind(_PATH)
    topology: Optional[Path] = _kind(_PATH)
    database: Optional[Path] = _kind(_PATH)
    immutable_database: Optional[Path] = _kind(_PATH)
    volatile_database: Optional[Path] = _kind(_PATH)
    port: Optional[int] = _kind(_INT)
    host_addr: Optional[str] = _kind(_STR)
    host_ipv6_addr: Optional[str] = _kind(_STR)
    validate_db: Optional[bool] = _kind(_BOOL)
    non_producing_node: Optional[bool] = _kind(_BOOL)
    tracer_socket_path_accept: Optional[Path] = _kind(_PATH)
    tracer_socket_path_connect: Optional[Path] = _kind(_PATH)
    byron_delegation_certificate: Optional[Path] = _kind(_PATH)
    byron_signing_key: Optional[Path] = _kind(_PATH)
    shelley_kes_key: Optional[Path] = _kind(_PATH)
    shelley_vrf_key: Optional[Path] = _kind(_PATH)
    shelley_operational_certificate: Optional[Path] = _kind(_PATH)
    bulk_credentials_file: Optional[Path] = _kind(_PATH)
    shutdown_ipc: Optional[int] = _kind(_INT)
    shutdown_on_slot_synced: Optional[int] = _kind(_INT)
    shutdown_on_block_synced: Optional[str] = _kind(_STR)
    mempool_capacity_override: Optional[int] = _kind(_INT)
    no_mempool_capacity_override: Optional[bool] = _kind(_BOOL)
    network: Network = _kind(_NETWORK, Network.MAINNET)
    era: Era = _kind(_ERA, Era.CONWAY)
    ttl_buffer: int = _kind(_INT, 1000)
    working_dir: Optional[Path] = _kind(_PATH)
    show_output: Optional[bool] = _kind(_BOOL)

    def __post_init__(self) -> None:
        if self.shutdown_on_slot_synced is not None and self.shutdown_on_slot_synced < 0:
            raise ConfigurationError.invalid_value("cardano.shutdown_on_slot_synced", self.shutdown_on_slot_synced, "Must be non-negative")
        if self.ttl_buffer < 0:
            raise ConfigurationError.invalid_value("cardano.ttl_buffer", self.ttl_buffer, "Must be non-negative")

    @classmethod
    def from_environment(cls) -> "CardanoSettings":
        return cls(
            cli=_locate_or_none("cardano-cli"),
            node=_locate_or_none("cardano-node"),
            hw_cli=_locate_or_none("cardano-hw-cli"),
            signer=_locate_or_none("cardano-signer"),
            socket=env_path("CARDANO_SOCKET_PATH"),
            config=env_path("CARDANO_CONFIG"),
            topology=env_path("CARDANO_TOPOLOGY"),
            database=env_path("CARDANO_DATABASE_PATH"),
            port=env_int("CARDANO_PORT", or_value=3001),
            host_addr=env_str("CARDANO_BIND_ADDR", or_value="0.0.0.0"),
            shelley_kes_key=env_path("CARDANO_SHELLEY_KES_KEY"),
            shelley_vrf_key=env_path("CARDANO_SHELLEY_VRF_KEY"),
            shelley_operational_certificate=env_path("CARDANO_SHELLEY_OPERATIONAL_CERTIFICATE"),
            network=Network.parse(env_str("NETWORK", or_value="mainnet")),
            era=Era.CONWAY,
            ttl_buffer=3600,
            working_dir=Path.cwd(),
            show_output=True,
        )


@dataclass(frozen=True)
class OgmiosSettings:
    binary: Optional[Path] = _kind(_PATH)
    host: Optional[str] = _kind(_STR)
    port: Optional[int] = _kind(_INT)
    timeout: Optional[int] = _kind(_INT)
    max_in_flight: Optional[int] = _kind(_INT)
    log_level: Optional[str] = _kind(_STR)
    log_level_health: Optional[str] = _kind(_STR)
    log_level_metrics: Optional[str] = _kind(_STR)
    log_level_websocket: Optional[str] = _kind(_STR)
    log_level_server: Optional[str] = _kind(_STR)
    log_level_options: Optional[str] = _kind(_STR)
    working_dir: Optional[Path] = _kind(_PATH)
    show_output: Optional[bool] = _kind(_BOOL)

    @classmethod
    def from_environment(cls) -> Optional["OgmiosSettings"]:
        binary = env_path("OGMIOS_BINARY") or _locate_or_none("ogmios")
        if binary is None:
            return None
        return cls(
            binary=binary,
            host=env_str("OGMIOS_HOST", or_value="127.0.0.1"),
            port=env_int("OGMIOS_PORT", or_value=1337),
            working_dir=env_path("OGMIOS_WORKING_DIR"),
            show_output=env_bool("OGMIOS_SHOW_OUTPUT", or_value=True),
        )


@dataclass(frozen=True)
class KupoSettings:
    binary: Optional[Path] = _kind(_PATH)
    host: Optional[str] = _kind(_STR)
    port: Optional[int] = _kind(_INT)
    since: Optional[str] = _kind(_STR)
    matches: Optional[Tuple[str, ...]] = _kind(_LIST)
    defer_db_indexes: Optional[bool] = _kind(_BOOL)
    prune_utxo: Optional[bool] = _kind(_BOOL)
    gc_interval: Optional[int] = _kind(_INT)
    max_concurrency: Optional[int] = _kind(_INT)
    in_memory: Optional[bool] = _kind(_BOOL)
    log_level: Optional[str] = _kind(_STR)
    log_level_http_server: Optional[str] = _kind(_STR)
    log_level_database: Optional[str] = _kind(_STR)
    log_level_consumer: Optional[str] = _kind(_STR)
    log_level_garbage_collector: Optional[str] = _kind(_STR)
    log_level_configuration: Optional[str] = _kind(_STR)
    working_dir: Optional[Path] = _kind(_PATH)
    show_output: Optional[bool] = _kind(_BOOL)

    @classmethod
    def from_environment(cls) -> Optional["KupoSettings"]:
        binary = env_path("KUPO_BINARY") or _locate_or_none("kupo")
        if binary is None:
            return None
        return cls(
            binary=binary,
            host=env_str("KUPO_HOST", or_value="127.0.0.1"),
            port=env_int("KUPO_PORT", or_value=1442),
            since=env_str("KUPO_SINCE"),
            working_dir=env_path("KUPO_WORKING_DIR"),
            show_output=env_bool("KUPO_SHOW_OUTPUT", or_value=True),
        )


@dataclass(frozen=True)
class MithrilSettings:
    binary: Optional[Path] = _kind(_PATH)
    aggregator_endpoint: Optional[str] = _kind(_STR)
    genesis_verification_key: Optional[str] = _kind(_STR)
    ancillary_verification_key: Optional[str] = _kind(_STR)
    download_dir: Optional[Path] = _kind(_PATH)
    working_dir: Optional[Path] = _kind(_PATH)
    show_output: Optional[bool] = _kind(_BOOL)

    @classmethod
    def from_environment(cls) -> Optional["MithrilSettings"]:
        binary = env_path("MITHRIL_BINARY") or _locate_or_none("mithril-client")
        if binary is None:
            return None
        return cls(
            binary=binary,
            aggregator_endpoint=env_str("AGGREGATOR_ENDPOINT"),
            genesis_verification_key=env_str("GENESIS_VERIFICATION_KEY"),
            ancillary_verification_key=env_str("ANCILLARY_VERIFICATION_KEY"),
            download_dir=env_path("MITHRIL_DOWNLOAD_DIR"),
            working_dir=env_path("MITHRIL_WORKING_DIR"),
        )


_SECTIONS: Tuple[Tuple[str, Type[Any]], ...] = (
    ("cardano", CardanoSettings),
    ("ogmios", OgmiosSettings),
    ("kupo", KupoSettings),
    ("mithril", MithrilSettings),
)


@dataclass(frozen=True)
class ToolSettings:
    """Top-level settings object handed to every wrapper."""

    cardano: CardanoSettings
    ogmios: Optional[OgmiosSettings] = None
    kupo: Optional[KupoSettings] = None
    mithril: Optional[MithrilSettings] = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ToolSettings":
        """Build settings from the snake_case JSON shape (``{"cardano": {...}, ...}``)."""
        if "cardano" not in payload or payload["cardano"] is None:
            raise ConfigurationError.missing_value("cardano", "configuration must define a 'cardano' section")
        sections: Dict[str, Any] = {}
        for name, section_cls in _SECTIONS:
            raw = payload.get(name)
            if raw is not None:
                sections[name] = _section_from_mapping(section_cls, name, raw)
        return cls(**sections)

    @classmethod
    def load(cls, path: Path | str) -> "ToolSettings":
        """
        Load settings from a JSON file, then overlay environment variables.

        Environment variables take precedence over the file. They use the
        deployment names read by ``from_environment`` (``CARDANO_SOCKET_PATH``,
        ``CARDANO_DATABASE_PATH``, ``CARDANO_BIND_ADDR``, ``NETWORK``,
        ``AGGREGATOR_ENDPOINT`` and the Mithril verification keys) and otherwise
        ``<SECTION>_<FIELD>``, for example ``KUPO_PORT`` or ``KUPO_MATCHES``
        (comma separated).

        Raises:
            MissingFileError: If *path* does not exist
            ConfigurationError: If the document or an override is malformed
        """
        config_path = Path(path).expanduser()
        try:
            payload = JsonConfigLoader.load_document(config_path)
        except FileNotFoundError as exc:
            raise MissingFileError(str(config_path)) from exc

        settings = cls.from_mapping(payload)
        return settings.with_environment_overrides()

    @classmethod
    def from_environment(cls) -> "ToolSettings":
        """Build default settings from deployment environment variables and PATH."""
        return cls(
            cardano=CardanoSettings.from_environment(),
            ogmios=OgmiosSettings.from_environment(),
            kupo=KupoSettings.from_environment(),
            mithril=MithrilSettings.from_environment(),
        )

    def with_environment_overrides(self) -> "ToolSettings":
        sections: Dict[str, Any] = {}
        for name, section_cls in _SECTIONS:
            current = getattr(self, name)
            if current is None:
                continue
            sections[name] = _section_from_env(section_cls, name, current)
        return replace(self, **sections)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for name, _ in _SECTIONS:
            section = getattr(self, name)
            payload[name] = _section_to_json(section) if section is not None else None
        return payload

    def save(self, path: Path | str) -> None:
        """
        Write the JSON representation to *path*.

        Raises:
            FileAlreadyExistsError: If *path* already exists
        """
        target = Path(path).expanduser()
        data = orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2)
        try:
            handle = open(target, "xb")
        except FileExistsError as exc:
            raise FileAlreadyExistsError(str(target)) from exc
        try:
            with handle:
                handle.write(data)
        except OSError:
            target.unlink(missing_ok=True)
            raise


__all__ = [
    "CardanoSettings",
    "KupoSettings",
    "MithrilSettings",
    "OgmiosSettings",
    "ToolSettings",
]
