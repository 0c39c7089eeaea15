"""cardano-signer wrapper (CIP-8/30/36/88/100 signing, verification and key generation)."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional

from ..commands.cardano_signer import CanonizeCommands, KeyGenCommands, SignCommands, VerifyCommands
from ..config.settings import ToolSettings
from ..errors import InvalidOutputError
from ..process import CommandRunner
from .base import BinaryWrapper

_VERSION_PATTERN = re.compile(r"cardano-signer (\d+\.\d+\.\d+)")


class CardanoSigner(BinaryWrapper):
    binary_name = "cardano-signer"
    minimum_version = "1.17.0"
    # the version is only printed in the help banner
    version_arguments = ("help",)

    def __init__(
        self,
        binary_path: Optional[Path | str],
        working_directory: Optional[Path | str] = None,
        *,
        env: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        super().__init__(binary_path, working_directory, env=env, logger=logger, runner=runner)
        self.canonize = CanonizeCommands(self)
        self.keygen = KeyGenCommands(self)
        self.sign = SignCommands(self)
        self.verify = VerifyCommands(self)

    @classmethod
    def from_settings(
        cls,
        settings: ToolSettings,
        *,
        logger: Optional[logging.Logger] = None,
        runner: Optional[CommandRunner] = None,
    ) -> "CardanoSigner":
        cardano = settings.cardano
        return cls(cardano.signer, cardano.working_dir, logger=logger, runner=runner)

    def parse_version(self, output: str) -> str:
        match = _VERSION_PATTERN.search(output)
        if match is None:
            raise InvalidOutputError.unparseable_version(output)
        return match.group(1)


__all__ = ["CardanoSigner"]
