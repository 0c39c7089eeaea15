"""``cardano-hw-cli node`` commands for pool cold keys."""

from __future__ import annotations

from pathlib import Path

from ..base import CommandGroup


class HWNodeCommands(CommandGroup):
    def __init__(self, binary) -> None:
        super().__init__(binary, ["node"])

    async def key_gen(
        self,
        path: str,
        hw_signing_file: Path | str,
        cold_verification_key_file: Path | str,
        operational_certificate_issue_counter_file: Path | str,
    ) -> str:
        arguments = [
            "--path",
            path,
            "--hw-signing-file",
            str(hw_signing_file),
            "--cold-verification-key-file",
            str(cold_verification_key_file),
            "--operational-certificate-issue-counter-file",
            str(operational_certificate_issue_counter_file),
        ]
        return await self.execute("key-gen", arguments)

    async def issue_op_cert(
        self,
        kes_verification_key_file: Path | str,
        kes_period: int,
        operational_certificate_issue_counter_file: Path | str,
        hw_signing_file: Path | str,
        out_file: Path | str,
    ) -> str:
        arguments = [
            "--kes-verification-key-file",
            str(kes_verification_key_file),
            "--kes-period",
            str(kes_period),
            "--operational-certificate-issue-counter-file",
            str(operational_certificate_issue_counter_file),
            "--hw-signing-file",
            str(hw_signing_file),
            "--out-file",
            str(out_file),
        ]
        return await self.execute("issue-op-cert", arguments)
