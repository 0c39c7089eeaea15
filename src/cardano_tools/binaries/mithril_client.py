"""mithril-client wrapper for snapshot download and transaction certification."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..commands.mithril import (
    CardanoDbCommands,
    CardanoStakeDistributionCommands,
    CardanoTransactionCommands,
    MithrilStakeDistributionCommands,
    ToolsCommands,
)
from ..config.settings import ToolSettings
from ..errors import ConfigurationMissingError, InvalidOutputError
from ..process import CommandRunner
from .base import BinaryWrapper, second_token


class MithrilClient(BinaryWrapper):
    binary_name = "mithril-client"
    minimum_version = "0.12.38"

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        aggregator_endpoint: Optional[str] = None,
        genesis_verification_key: Optional[str] = None,
        ancillary_verification_key: Optional[str] = None,
        download_dir: Optional[Path | str] = None,
        env: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        merged_env = dict(env or {})
        if genesis_verification_key:
            merged_env.setdefault("GENESIS_VERIFICATION_KEY", genesis_verification_key)
        super().__init__(binary_path, working_directory, env=merged_env, logger=logger, runner=runner)
        self.aggregator_endpoint = aggregator_endpoint
        self.genesis_verification_key = genesis_verification_key
        self.ancillary_verification_key = ancillary_verification_key
        self.download_dir = str(download_dir) if download_dir is not None else None

        self.cardano_db = CardanoDbCommands(self)
        self.cardano_transaction = CardanoTransactionCommands(self)
        self.mithril_stake_distribution = MithrilStakeDistributionCommands(self)
        self.cardano_stake_distribution = CardanoStakeDistributionCommands(self)
        self.tools = ToolsCommands(self)

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "MithrilClient":
        mithril = settings.mithril
        if mithril is None:
            raise ConfigurationMissingError.section("Mithril")
        cardano = settings.cardano
        download_dir = mithril.download_dir or cardano.database
        return cls(
            mithril.binary,
            mithril.working_dir or cardano.working_dir,
            aggregator_endpoint=mithril.aggregator_endpoint,
            genesis_verification_key=mithril.genesis_verification_key,
            ancillary_verification_key=mithril.ancillary_verification_key,
            download_dir=download_dir,
            logger=logger,
            runner=runner,
        )

    def parse_version(self, output: str) -> str:
        token = second_token(output)
        if token is None:
            raise InvalidOutputError.unparseable_version(output)
        # "0.12.38+254d8e4" -> "0.12.38"
        return token.split("+", 1)[0]

    async def download_latest_snapshot(
        self,
        download_dir: Optional[str] = None,
        include_ancillary: bool = True,
    ) -> str:
        return await self.cardano_db.download(
            "latest",
            download_dir or self.download_dir,
            include_ancillary=include_ancillary,
            ancillary_verification_key=self.ancillary_verification_key,
        )

    async def download_latest_snapshot_fast(self, download_dir: Optional[str] = None) -> str:
        return await self.cardano_db.download_skip_ancillary("latest", download_dir or self.download_dir)

    async def list_snapshots(self) -> str:
        return await self.cardano_db.snapshot_list(["--json"])

    async def certify_transaction(self, transaction_hash: str) -> str:
        return await self.cardano_transaction.certify([transaction_hash])


__all__ = ["MithrilClient"]
