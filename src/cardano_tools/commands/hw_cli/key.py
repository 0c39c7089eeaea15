"""``cardano-hw-cli key`` commands."""

from __future__ import annotations

from pathlib import Path

from ..base import CommandGroup


class HWKeyCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["key"])

    async def verification_key(self, hw_signing_file: Path | str, verification_key_file: Path | str) -> str:
        arguments = [
            "--hw-signing-file",
            str(hw_signing_file),
            "--verification-key-file",
            str(verification_key_file),
        ]
        return await self.execute("verification-key", arguments)
