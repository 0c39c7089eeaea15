"""cardano-hw-cli wrapper (Ledger and Trezor hardware wallets)."""

from __future__ import annotations

import asyncio
import logging
import os
import re
from pathlib import Path
from typing import Dict, Optional

from ..commands.hw_cli import (
    HWAddressCommands,
    HWDeviceCommands,
    HWKeyCommands,
    HWNodeCommands,
    HWTransactionCommands,
    HWVoteCommands,
)
from ..config.network import Era, HardwareWalletType, Network
from ..config.settings import ToolSettings
from ..errors import CardanoToolsError, DeviceError, InvalidOutputError
from ..process import CommandRunner
from .base import BinaryWrapper
from .cardano_cli import socket_environment

_VERSION_PATTERN = re.compile(r"version (\d+\.\d+\.\d+)")

MIN_LEDGER_CARDANO_APP = "4.0.0"
MIN_TREZOR_FIRMWARE = "2.4.3"
DEVICE_POLL_ATTEMPTS = 10
DEVICE_POLL_INTERVAL = 10.0


class CardanoHWCLI(BinaryWrapper):
    binary_name = "cardano-hw-cli"
    minimum_version = "1.10.0"
    version_arguments = ("version",)

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        network: Network = Network.MAINNET,
        era: Era = Era.CONWAY,
        env: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
        poll_interval: float = DEVICE_POLL_INTERVAL,
    ) -> None:
        super().__init__(binary_path, working_directory, env=env, logger=logger, runner=runner)
        self.network = network
        self.era = era
        self.poll_interval = poll_interval

        self.address = HWAddressCommands(self)
        self.device = HWDeviceCommands(self)
        self.key = HWKeyCommands(self)
        self.transaction = HWTransactionCommands(self)
        self.node = HWNodeCommands(self)
        self.vote = HWVoteCommands(self)

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "CardanoHWCLI":
        cardano = settings.cardano
        return cls(
            cardano.hw_cli,
            cardano.working_dir,
            network=cardano.network,
            era=cardano.era,
            env=socket_environment(cardano),
            logger=logger,
            runner=runner,
        )

    def parse_version(self, output: str) -> str:
        match = _VERSION_PATTERN.search(output)
        if match is None:
            raise InvalidOutputError(f"Could not parse cardano-hw-cli version from: {output}")
        return match.group(1)

    async def start_hardware_wallet(self, only_for_type: Optional[HardwareWalletType] = None) -> HardwareWalletType:
        """
        Wait for a connected, unlocked device and identify it.

        ``device version`` is polled up to ``DEVICE_POLL_ATTEMPTS`` times.

        Raises:
            DeviceError: If no device answers, the device is unsupported, or it
                is not the *only_for_type* device
        """
        self.logger.info("Please connect & unlock your Hardware Wallet, open the Cardano App on Ledger devices")

        device_info: Optional[str] = None
        for attempt in range(1, DEVICE_POLL_ATTEMPTS + 1):
            try:
                output = await self.device.version()
            except CardanoToolsError as exc:
                self.logger.warning(
                    "Device check failed (attempt %s/%s): %s", attempt, DEVICE_POLL_ATTEMPTS, exc
                )
            else:
                if "app version" in output or "undefined" in output:
                    device_info = output
                    break
            if attempt < DEVICE_POLL_ATTEMPTS:
                await asyncio.sleep(self.poll_interval)

        if device_info is None:
            raise DeviceError(f"Hardware wallet could not be accessed after {DEVICE_POLL_ATTEMPTS} attempts")

        if "Ledger" in device_info:
            device_type = HardwareWalletType.LEDGER
            minimum = MIN_LEDGER_CARDANO_APP
        elif "Trezor" in device_info:
            device_type = HardwareWalletType.TREZOR
            minimum = MIN_TREZOR_FIRMWARE
        else:
            raise DeviceError("Only Ledger and Trezor Hardware Wallets are supported")

        self.logger.info(
            "%s version: %s, minimum required: %s", device_type.display_name, device_info.split()[-1], minimum
        )

        if only_for_type is not None and device_type != only_for_type:
            raise DeviceError(
                f"This function is NOT available on {device_type.display_name}, "
                f"only available on {only_for_type.display_name}"
            )

        self.logger.info("Hardware wallet (%s) ready. Please approve actions on your device.", device_type.display_name)
        return device_type

    async def autocorrect_tx_body_file(self, tx_body_file: Path | str) -> None:
        """Rewrite *tx_body_file* in place into the canonical order hardware wallets expect."""
        corrected = f"{tx_body_file}-corrected"
        await self.transaction.transform(tx_body_file, corrected)
        os.replace(corrected, tx_body_file)
        self.logger.info("Transaction body file autocorrected for hardware wallet compatibility")


__all__ = ["CardanoHWCLI"]
