"""``cardano-cli <era> node`` commands for stake pool operator keys."""

from __future__ import annotations

from pathlib import Path

from ..base import EraCommandGroup


class NodeCommands(EraCommandGroup):
    noun = "node"

    async def key_gen(
        self,
        verification_key_file: Path | str,
        signing_key_file: Path | str,
        operational_certificate_issue_counter_file: Path | str,
    ) -> str:
        arguments = [
            "--verification-key-file",
            str(verification_key_file),
            "--signing-key-file",
            str(signing_key_file),
            "--operational-certificate-issue-counter-file",
            str(operational_certificate_issue_counter_file),
        ]
        return await self.execute("key-gen", arguments)

    async def key_gen_kes(self, verification_key_file: Path | str, signing_key_file: Path | str) -> str:
        arguments = ["--verification-key-file", str(verification_key_file), "--signing-key-file", str(signing_key_file)]
        return await self.execute("key-gen-KES", arguments)

    async def key_gen_vrf(self, verification_key_file: Path | str, signing_key_file: Path | str) -> str:
        arguments = ["--verification-key-file", str(verification_key_file), "--signing-key-file", str(signing_key_file)]
        return await self.execute("key-gen-VRF", arguments)

    async def key_hash_vrf(self, verification_key_file: Path | str) -> str:
        return await self.execute("key-hash-VRF", ["--verification-key-file", str(verification_key_file)])

    async def issue_op_cert(
        self,
        kes_verification_key_file: Path | str,
        cold_signing_key_file: Path | str,
        operational_certificate_issue_counter_file: Path | str,
        kes_period: int,
        out_file: Path | str,
    ) -> str:
        arguments = [
            "--kes-verification-key-file",
            str(kes_verification_key_file),
            "--cold-signing-key-file",
            str(cold_signing_key_file),
            "--operational-certificate-issue-counter-file",
            str(operational_certificate_issue_counter_file),
            "--kes-period",
            str(kes_period),
            "--out-file",
            str(out_file),
        ]
        return await self.execute("issue-op-cert", arguments)

    async def new_counter(
        self,
        cold_verification_key_file: Path | str,
        counter_value: int,
        operational_certificate_issue_counter_file: Path | str,
    ) -> str:
        arguments = [
            "--cold-verification-key-file",
            str(cold_verification_key_file),
            "--counter-value",
            str(counter_value),
            "--operational-certificate-issue-counter-file",
            str(operational_certificate_issue_counter_file),
        ]
        return await self.execute("new-counter", arguments)
