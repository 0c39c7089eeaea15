import pytest

from cardano_tools.binaries import CardanoHWCLI
from cardano_tools.binaries.cardano_hw_cli import DEVICE_POLL_ATTEMPTS
from cardano_tools.config import HardwareWalletType
from cardano_tools.errors import CommandFailedError, DeviceError, InvalidOutputError
from tests.helpers.spy_runner import SpyRunner


def make_hw_cli(stub_binary, tmp_path, *responses):
    spy = SpyRunner(*responses)
    return CardanoHWCLI(stub_binary, tmp_path, runner=spy, poll_interval=0), spy


@pytest.mark.asyncio
async def test_version_uses_version_subcommand(stub_binary, tmp_path):
    hw_cli, spy = make_hw_cli(stub_binary, tmp_path, "Cardano HW CLI\nversion 1.15.0\ncommit: abc")

    assert await hw_cli.version() == "1.15.0"
    assert spy.arguments == [["version"]]


@pytest.mark.asyncio
async def test_version_unparseable(stub_binary, tmp_path):
    hw_cli, _ = make_hw_cli(stub_binary, tmp_path, "no version here")

    with pytest.raises(InvalidOutputError):
        await hw_cli.version()


@pytest.mark.asyncio
async def test_start_hardware_wallet_retries_until_device_answers(stub_binary, tmp_path):
    hw_cli, spy = make_hw_cli(
        stub_binary,
        tmp_path,
        CommandFailedError(["cardano-hw-cli", "device", "version"], "no device"),
        "Ledger app version 7.1.4",
    )

    assert await hw_cli.start_hardware_wallet() is HardwareWalletType.LEDGER
    assert spy.arguments == [["device", "version"], ["device", "version"]]


@pytest.mark.asyncio
async def test_start_hardware_wallet_detects_trezor(stub_binary, tmp_path):
    hw_cli, _ = make_hw_cli(stub_binary, tmp_path, "Trezor app version 2.7.2")

    assert await hw_cli.start_hardware_wallet(HardwareWalletType.TREZOR) is HardwareWalletType.TREZOR


@pytest.mark.asyncio
async def test_start_hardware_wallet_rejects_other_device_type(stub_binary, tmp_path):
    hw_cli, _ = make_hw_cli(stub_binary, tmp_path, "Trezor app version 2.7.2")

    with pytest.raises(DeviceError, match="only available on Ledger"):
        await hw_cli.start_hardware_wallet(HardwareWalletType.LEDGER)


@pytest.mark.asyncio
async def test_start_hardware_wallet_rejects_unknown_vendor(stub_binary, tmp_path):
    hw_cli, _ = make_hw_cli(stub_binary, tmp_path, "Keystone app version 1.0.0")

    with pytest.raises(DeviceError, match="Only Ledger and Trezor"):
        await hw_cli.start_hardware_wallet()


@pytest.mark.asyncio
async def test_start_hardware_wallet_gives_up(stub_binary, tmp_path):
    hw_cli, spy = make_hw_cli(stub_binary, tmp_path)

    with pytest.raises(DeviceError, match="could not be accessed"):
        await hw_cli.start_hardware_wallet()

    assert len(spy.calls) == DEVICE_POLL_ATTEMPTS


@pytest.mark.asyncio
async def test_autocorrect_replaces_body_in_place(stub_binary, tmp_path):
    hw_cli, spy = make_hw_cli(stub_binary, tmp_path)
    tx_body = tmp_path / "tx.raw"
    tx_body.write_text("original")
    (tmp_path / "tx.raw-corrected").write_text("canonical")

    await hw_cli.autocorrect_tx_body_file(tx_body)

    assert tx_body.read_text() == "canonical"
    assert not (tmp_path / "tx.raw-corrected").exists()
    assert spy.arguments == [
        ["transaction", "transform", "--tx-file", str(tx_body), "--out-file", f"{tx_body}-corrected"]
    ]
