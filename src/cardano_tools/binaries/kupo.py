"""Kupo chain-index daemon wrapper."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..commands.base import optional_flag, switch
from ..config.settings import CardanoSettings, KupoSettings, ToolSettings
from ..errors import ConfigurationMissingError, InvalidOutputError
from ..process import CommandRunner
from .base import SupervisedBinary

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1442

_COMPONENT_LOG_LEVELS = (
    ("--log-level-http-server", "log_level_http_server"),
    ("--log-level-database", "log_level_database"),
    ("--log-level-consumer", "log_level_consumer"),
    ("--log-level-garbage-collector", "log_level_garbage_collector"),
    ("--log-level-configuration", "log_level_configuration"),
)


def kupo_arguments(cardano: CardanoSettings, kupo: KupoSettings) -> List[str]:
    """
    Build the Kupo argument vector.

    ``--in-memory`` wins over ``--workdir``; each match pattern becomes its own
    ``--match`` flag.
    """
    if cardano.socket is None:
        raise ConfigurationMissingError.value("Cardano node socket path", "Kupo")
    if cardano.config is None:
        raise ConfigurationMissingError.value("Cardano node config path", "Kupo")

    arguments = [
        "--node-socket",
        str(cardano.socket),
        "--node-config",
        str(cardano.config),
        "--host",
        kupo.host or DEFAULT_HOST,
        "--port",
        str(kupo.port or DEFAULT_PORT),
    ]
    arguments += optional_flag("--since", kupo.since)
    for pattern in kupo.matches or ():
        arguments += ["--match", pattern]
    if kupo.in_memory:
        arguments.append("--in-memory")
    elif kupo.working_dir is not None:
        arguments += ["--workdir", str(kupo.working_dir)]
    arguments += switch("--defer-db-indexes", kupo.defer_db_indexes)
    arguments += switch("--prune-utxo", kupo.prune_utxo)
    arguments += optional_flag("--gc-interval", kupo.gc_interval)
    arguments += optional_flag("--max-concurrency", kupo.max_concurrency)
    if kupo.log_level is not None:
        arguments += ["--log-level", kupo.log_level]
    else:
        for flag, attribute in _COMPONENT_LOG_LEVELS:
            arguments += optional_flag(flag, getattr(kupo, attribute))
    return arguments


class Kupo(SupervisedBinary):
    binary_name = "kupo"
    minimum_version = "2.3.4"

    def __init__(self, cardano: CardanoSettings, kupo: KupoSettings, **kwargs) -> None:
        super().__init__(kupo.binary, kupo.working_dir, show_output=kupo.show_output, **kwargs)
        self.cardano = cardano
        self.settings = kupo

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "Kupo":
        if settings.kupo is None:
            raise ConfigurationMissingError.section("Kupo")
        return cls(settings.cardano, settings.kupo, logger=logger, runner=runner)

    def parse_version(self, output: str) -> str:
        # "v2.3.4" -> "2.3.4"
        stripped = output.strip()
        if not stripped:
            raise InvalidOutputError.unparseable_version(output)
        return stripped.split()[0].lstrip("v")

    def build_arguments(self) -> List[str]:
        return kupo_arguments(self.cardano, self.settings)


__all__ = ["Kupo", "kupo_arguments"]
