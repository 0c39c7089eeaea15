"""JSON configuration file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import orjson

from ..errors import ConfigurationError


class JsonConfigLoader:
    """Loads JSON documents used as configuration sources."""

    @staticmethod
    def load_document(path: Path) -> Dict[str, Any]:
        """
        Parse *path* as a JSON object.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file is unreadable, invalid JSON or not an object
        """
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise
        except OSError as exc:
            raise ConfigurationError.load_failed("JSON config", str(path)) from exc

        try:
            payload = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError(f"Failed to parse JSON config {path}") from exc

        if not isinstance(payload, dict):
            raise ConfigurationError(f"JSON config {path} must contain an object at the top level")
        return payload

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load a flat JSON mapping of environment names to scalar values.

        Returns:
            Dictionary with string values, empty when the file does not exist

        Raises:
            ConfigurationError: If the file is invalid or holds nested values
        """
        if not path.exists():
            return {}
        payload = JsonConfigLoader.load_document(path)
        return JsonConfigLoader._normalize_values(payload, path)

    @staticmethod
    def _normalize_values(payload: Dict[str, Any], path: Path) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                raise ConfigurationError(f"JSON config {path} must map environment names to scalar values (problematic key: {key})")
            if value is None:
                normalized[str(key)] = ""
            elif isinstance(value, bool):
                normalized[str(key)] = "true" if value else "false"
            else:
                normalized[str(key)] = str(value)
        return normalized
