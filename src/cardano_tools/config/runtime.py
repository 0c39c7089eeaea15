"""Runtime helpers for working with environment-backed configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".cardano_tools.env")
_JSON_ENV_CANDIDATES = (Path("config/runtime_env.json"),)

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load fallback values from .env-style files or JSON defaults, first source wins."""
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)
    for path in _JSON_ENV_CANDIDATES:
        for key, value in JsonConfigLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return parse_bool(raw, name)


def parse_bool(raw: str, name: str) -> bool:
    """Interpret a textual boolean the same way for env vars and config files."""
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name!r} must be a boolean (allowed: {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {raw!r})")


def split_list(raw: str, separator: str = ",") -> tuple[str, ...]:
    """Split *raw* on *separator* into stripped, non-empty items; first occurrence wins."""
    items = (item.strip() for item in raw.split(separator))
    return tuple(dict.fromkeys(item for item in items if item))


def env_list(name: str, or_value: Sequence[str] | None = None, *, separator: str = ",") -> tuple[str, ...] | None:
    """Fetch a delimited list (Kupo match patterns, for instance) from the environment."""

    raw = env_str(name)
    if raw is None:
        return tuple(or_value) if or_value is not None else None
    return split_list(raw, separator)


def env_path(name: str, or_value: Path | None = None) -> Path | None:
    """Fetch an environment variable as an expanded filesystem path."""

    raw = env_str(name)
    if raw is None:
        return or_value
    return Path(raw).expanduser()


__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_int",
    "env_list",
    "env_path",
    "env_str",
    "parse_bool",
    "split_list",
]
