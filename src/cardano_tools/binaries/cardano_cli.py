"""cardano-cli wrapper with high-level query and transaction helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import orjson

from ..commands.cardano_cli import (
    AddressCommands,
    DebugCommands,
    GenesisCommands,
    GovernanceCommands,
    HashCommands,
    KeyCommands,
    LegacyCommands,
    NodeCommands,
    QueryCommands,
    StakeAddressCommands,
    StakePoolCommands,
    TextViewCommands,
    TransactionCommands,
)
from ..config.network import Era, Network
from ..config.settings import CardanoSettings, ToolSettings
from ..errors import CardanoToolsError, InvalidOutputError, NodeNotSyncedError
from ..process import CommandRunner
from ..results import StakeAddressInfo
from .base import BinaryWrapper, second_token

SOCKET_ENV_VAR = "CARDANO_NODE_SOCKET_PATH"
_STDOUT = "/dev/stdout"


def socket_environment(settings: CardanoSettings) -> Dict[str, str]:
    if settings.socket is None:
        return {}
    return {SOCKET_ENV_VAR: str(settings.socket)}


def signed_path(tx_file: Path | str) -> Path:
    tx_path = Path(tx_file)
    return tx_path.with_name(f"{tx_path.name}.signed")


def _decode_json(payload: bytes | str, what: str) -> Any:
    try:
        return orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise InvalidOutputError(f"Could not decode {what}: {exc}") from exc


class CardanoCLI(BinaryWrapper):
    binary_name = "cardano-cli"
    minimum_version = "8.0.0"

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        network: Network = Network.MAINNET,
        era: Era = Era.CONWAY,
        ttl_buffer: int = 1000,
        env: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        super().__init__(binary_path, working_directory, env=env, logger=logger, runner=runner)
        self.network = network
        self.era = era
        self.ttl_buffer = ttl_buffer

        self.address = AddressCommands(self)
        self.key = KeyCommands(self)
        self.query = QueryCommands(self)
        self.transaction = TransactionCommands(self)
        self.stake_address = StakeAddressCommands(self)
        self.hash = HashCommands(self)
        self.node = NodeCommands(self)
        self.stake_pool = StakePoolCommands(self)
        self.governance = GovernanceCommands(self)
        self.genesis = GenesisCommands(self)
        self.legacy = LegacyCommands(self)
        self.text_view = TextViewCommands(self)
        self.debug = DebugCommands(self)

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "CardanoCLI":
        cardano = settings.cardano
        return cls(
            cardano.cli,
            cardano.working_dir,
            network=cardano.network,
            era=cardano.era,
            ttl_buffer=cardano.ttl_buffer,
            env=socket_environment(cardano),
            logger=logger,
            runner=runner,
        )

    def parse_version(self, output: str) -> str:
        version = second_token(output)
        if version is None:
            raise InvalidOutputError.unparseable_version(output)
        return version

    async def get_sync_progress(self) -> float:
        """Return the node's sync percentage, or 0.0 when the node cannot be queried."""
        try:
            tip = await self.query.tip()
            return tip.sync_percentage
        except (CardanoToolsError, ValueError) as exc:
            self.logger.warning("Unable to check sync progress. Node may not be online yet. %s", exc)
            return 0.0

    async def check_online(self) -> None:
        progress = await self.get_sync_progress()
        if progress < 100.0:
            raise NodeNotSyncedError(progress)

    async def get_era(self) -> Optional[Era]:
        try:
            tip = await self.query.tip()
        except CardanoToolsError as exc:
            self.logger.info("Unable to check era. Node may not be fully synced. %s", exc)
            return None
        self._log_if_unsynced(tip.sync_progress)
        try:
            return Era(tip.era.lower())
        except ValueError:
            self.logger.warning("Node reported unknown era %r", tip.era)
            return None

    async def get_epoch(self) -> int:
        tip = await self.query.tip()
        try:
            progress = tip.sync_percentage
        except ValueError as exc:
            raise InvalidOutputError(f"Could not parse syncProgress as a number: {tip.sync_progress}") from exc
        if progress < 100.0:
            raise NodeNotSyncedError(progress)
        return tip.epoch

    async def get_tip(self) -> int:
        """Return the current slot."""
        tip = await self.query.tip()
        self._log_if_unsynced(tip.sync_progress)
        return tip.slot

    async def get_current_ttl(self) -> int:
        return await self.get_tip() + self.ttl_buffer

    async def get_protocol_parameters(self, params_file: Optional[Path | str] = None) -> Dict[str, Any]:
        """Fetch protocol parameters, optionally persisting them to *params_file*."""
        out_file = str(params_file) if params_file is not None else _STDOUT
        output = await self.query.protocol_parameters(["--out-file", out_file])
        if params_file is not None:
            return _decode_json(Path(params_file).read_bytes(), "protocol parameters")
        return _decode_json(output, "protocol parameters")

    async def utxos(self, address: str) -> Dict[str, Any]:
        """Return the UTxO set at *address* keyed by ``<txid>#<index>``."""
        output = await self.query.utxo(["--address", address, "--out-file", _STDOUT])
        data = _decode_json(output, "UTxOs")
        if not isinstance(data, dict):
            raise InvalidOutputError("UTxO query must return a JSON object")
        return data

    async def stake_address_info(self, address: str) -> List[StakeAddressInfo]:
        output = await self.query.stake_address_info(["--address", address, "--out-file", _STDOUT])
        return StakeAddressInfo.list_from_json(output)

    async def sign_transaction(self, tx_file: Path | str, signing_keys: Sequence[Path | str]) -> Path:
        signed_tx_file = signed_path(tx_file)
        arguments = ["--tx-body-file", str(tx_file)]
        for key in signing_keys:
            arguments.extend(["--signing-key-file", str(key)])
        arguments.extend(["--out-file", str(signed_tx_file)])
        await self.transaction.sign(arguments)
        self.logger.debug("Transaction signed: %s", signed_tx_file)
        return signed_tx_file

    async def witness_transaction(self, tx_file: Path | str, witnesses: Sequence[Path | str]) -> Path:
        """Assemble *tx_file* with witness files into ``<tx_file>.signed``."""
        signed_tx_file = signed_path(tx_file)
        arguments = ["--tx-body-file", str(tx_file)]
        for witness in witnesses:
            arguments.extend(["--witness-file", str(witness)])
        arguments.extend(["--out-file", str(signed_tx_file)])
        await self.transaction.assemble(arguments)
        self.logger.debug("Transaction assembled with witnesses: %s", signed_tx_file)
        return signed_tx_file

    async def submit_transaction(self, signed_tx_file: Path | str, cleanup: bool = False) -> str:
        """Submit a signed transaction and return its id."""
        tx_arguments = ["--tx-file", str(signed_tx_file)]
        await self.transaction.submit(tx_arguments)
        tx_id = await self.transaction.txid(tx_arguments)

        if cleanup:
            try:
                Path(signed_tx_file).unlink()
            except FileNotFoundError:
                self.logger.debug("Signed transaction %s already removed", signed_tx_file)
            else:
                self.logger.debug("Cleaned up transaction file: %s", signed_tx_file)

        self.logger.debug("Transaction submitted successfully: %s", tx_id)
        return tx_id

    def _log_if_unsynced(self, sync_progress: str) -> None:
        try:
            if float(sync_progress) < 100.0:
                self.logger.info("Node not fully synced!")
        except ValueError:
            self.logger.warning("Could not parse syncProgress as a number: %s", sync_progress)


__all__ = ["SOCKET_ENV_VAR", "CardanoCLI", "signed_path", "socket_environment"]
