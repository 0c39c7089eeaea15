"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "


class DotenvLoader:
    """Loads ``KEY=value`` pairs from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Blank lines and ``#`` comments are skipped, an optional leading
        ``export`` is accepted and surrounding quotes are removed from values.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of variables, empty when the file does not exist

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise ConfigurationError.load_failed("dotenv file", str(path)) from exc

        values: Dict[str, str] = {}
        for line in lines:
            parsed = DotenvLoader._parse_env_line(line)
            if parsed is not None:
                key, value = parsed
                values[key] = value
        return values

    @staticmethod
    def _parse_env_line(line: str) -> Optional[Tuple[str, str]]:
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            return None
        if stripped.startswith(_EXPORT_PREFIX):
            stripped = stripped[len(_EXPORT_PREFIX) :].lstrip()

        key, raw_value = stripped.split("=", 1)
        key = key.strip()
        if not key:
            return None
        value = raw_value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        return key, value
