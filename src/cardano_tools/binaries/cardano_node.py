"""cardano-node daemon wrapper."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..commands.base import optional_flag, switch
from ..config.settings import CardanoSettings, ToolSettings
from ..errors import ConfigurationMissingError, InvalidOutputError
from ..process import CommandRunner
from .base import SupervisedBinary, second_token
from .cardano_cli import socket_environment


def node_run_arguments(cardano: CardanoSettings) -> List[str]:
    """
    Build the ``cardano-node run`` argument vector.

    ``--database-path`` is only passed when neither the immutable nor the
    volatile database path is configured.

    Raises:
        ConfigurationMissingError: If the node config or socket path is missing
    """
    if cardano.config is None:
        raise ConfigurationMissingError.value("Cardano node config path", "cardano-node run")
    if cardano.socket is None:
        raise ConfigurationMissingError.value("Cardano node socket path", "cardano-node run")

    arguments = ["run", "--config", str(cardano.config), "--socket-path", str(cardano.socket)]
    arguments += optional_flag("--topology", cardano.topology)
    arguments += optional_flag("--immutable-database-path", cardano.immutable_database)
    arguments += optional_flag("--volatile-database-path", cardano.volatile_database)
    if cardano.immutable_database is None and cardano.volatile_database is None:
        arguments += optional_flag("--database-path", cardano.database)
    arguments += switch("--validate-db", cardano.validate_db)
    arguments += optional_flag("--tracer-socket-path-accept", cardano.tracer_socket_path_accept)
    arguments += optional_flag("--tracer-socket-path-connect", cardano.tracer_socket_path_connect)
    arguments += optional_flag("--byron-delegation-certificate", cardano.byron_delegation_certificate)
    arguments += optional_flag("--byron-signing-key", cardano.byron_signing_key)
    arguments += optional_flag("--shelley-kes-key", cardano.shelley_kes_key)
    arguments += optional_flag("--shelley-vrf-key", cardano.shelley_vrf_key)
    arguments += optional_flag("--shelley-operational-certificate", cardano.shelley_operational_certificate)
    arguments += optional_flag("--bulk-credentials-file", cardano.bulk_credentials_file)
    arguments += switch("--non-producing-node", cardano.non_producing_node)
    arguments += optional_flag("--port", cardano.port)
    arguments += optional_flag("--host-addr", cardano.host_addr)
    arguments += optional_flag("--host-ipv6-addr", cardano.host_ipv6_addr)
    arguments += optional_flag("--shutdown-ipc", cardano.shutdown_ipc)
    arguments += optional_flag("--shutdown-on-slot-synced", cardano.shutdown_on_slot_synced)
    arguments += optional_flag("--shutdown-on-block-synced", cardano.shutdown_on_block_synced)
    arguments += optional_flag("--mempool-capacity-override", cardano.mempool_capacity_override)
    arguments += switch("--no-mempool-capacity-override", cardano.no_mempool_capacity_override)
    return arguments


class CardanoNode(SupervisedBinary):
    binary_name = "cardano-node"
    minimum_version = "8.0.0"

    def __init__(self, settings: CardanoSettings, **kwargs) -> None:
        kwargs.setdefault("env", socket_environment(settings))
        super().__init__(settings.node, settings.working_dir, show_output=settings.show_output, **kwargs)
        self.settings = settings

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "CardanoNode":
        if settings.cardano.socket is None:
            raise ConfigurationMissingError.value("Cardano node socket path", "cardano-node run")
        return cls(settings.cardano, logger=logger, runner=runner)

    def parse_version(self, output: str) -> str:
        version = second_token(output)
        if version is None:
            raise InvalidOutputError.unparseable_version(output)
        return version

    def build_arguments(self) -> List[str]:
        return node_run_arguments(self.settings)


__all__ = ["CardanoNode", "node_run_arguments"]
