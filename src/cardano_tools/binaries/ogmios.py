"""Ogmios daemon wrapper."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..commands.base import optional_flag
from ..config.settings import CardanoSettings, OgmiosSettings, ToolSettings
from ..errors import ConfigurationMissingError, InvalidOutputError
from ..process import CommandRunner
from .base import SupervisedBinary

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1337

_COMPONENT_LOG_LEVELS = (
    ("--log-level-health", "log_level_health"),
    ("--log-level-metrics", "log_level_metrics"),
    ("--log-level-websocket", "log_level_websocket"),
    ("--log-level-server", "log_level_server"),
    ("--log-level-options", "log_level_options"),
)


def ogmios_arguments(cardano: CardanoSettings, ogmios: OgmiosSettings) -> List[str]:
    """Build the Ogmios argument vector; a global log level replaces the per-component ones."""
    if cardano.config is None:
        raise ConfigurationMissingError.value("Cardano node config path", "Ogmios")
    if cardano.socket is None:
        raise ConfigurationMissingError.value("Cardano node socket path", "Ogmios")

    arguments = [
        "--node-config",
        str(cardano.config),
        "--node-socket",
        str(cardano.socket),
        "--host",
        ogmios.host or DEFAULT_HOST,
        "--port",
        str(ogmios.port or DEFAULT_PORT),
    ]
    arguments += optional_flag("--timeout", ogmios.timeout)
    arguments += optional_flag("--max-in-flight", ogmios.max_in_flight)
    if ogmios.log_level is not None:
        arguments += ["--log-level", ogmios.log_level]
    else:
        for flag, attribute in _COMPONENT_LOG_LEVELS:
            arguments += optional_flag(flag, getattr(ogmios, attribute))
    return arguments


class Ogmios(SupervisedBinary):
    binary_name = "ogmios"
    minimum_version = "6.13.0"

    def __init__(self, cardano: CardanoSettings, ogmios: OgmiosSettings, **kwargs) -> None:
        super().__init__(ogmios.binary, ogmios.working_dir, show_output=ogmios.show_output, **kwargs)
        self.cardano = cardano
        self.settings = ogmios

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "Ogmios":
        if settings.ogmios is None:
            raise ConfigurationMissingError.section("Ogmios")
        return cls(settings.cardano, settings.ogmios, logger=logger, runner=runner)

    def parse_version(self, output: str) -> str:
        # "v6.13.0 (abc123)" -> "6.13.0"
        parts = output.split()
        if not parts:
            raise InvalidOutputError.unparseable_version(output)
        return parts[0].lstrip("v")

    def build_arguments(self) -> List[str]:
        return ogmios_arguments(self.cardano, self.settings)


__all__ = ["Ogmios", "ogmios_arguments"]
