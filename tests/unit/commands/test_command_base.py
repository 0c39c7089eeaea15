from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from cardano_tools.commands.base import (
    CommandGroup,
    EraCommandGroup,
    optional_flag,
    parse_int_token,
    split_lines,
    switch,
)
from cardano_tools.config.network import Era, Network
from cardano_tools.errors import InvalidOutputError


class _PoolCommands(EraCommandGroup):
    noun = "stake-pool"


def _fake_binary(**attributes):
    return SimpleNamespace(
        run_command=AsyncMock(return_value="ok"),
        run_command_bytes=AsyncMock(return_value=b"ok"),
        **attributes,
    )


def test_command_for_composes_base_subcommand_and_arguments():
    group = CommandGroup(_fake_binary(), ["address"])

    assert group.command_for("key-gen", ["--path", "1852H/1815H/0H/0/0"]) == [
        "address",
        "key-gen",
        "--path",
        "1852H/1815H/0H/0/0",
    ]


def test_network_and_era_default_when_binary_has_none():
    group = CommandGroup(_fake_binary())

    assert group.network == Network.MAINNET
    assert group.era is Era.CONWAY
    assert group.network_args == ["--mainnet"]


def test_era_group_uses_binary_era():
    group = _PoolCommands(_fake_binary(era=Era.BABBAGE))

    assert group.base_command == ["babbage", "stake-pool"]


def test_era_group_follows_later_era_change():
    binary = _fake_binary(era=Era.BABBAGE)
    group = _PoolCommands(binary)

    binary.era = Era.CONWAY

    assert group.base_command == ["conway", "stake-pool"]
    assert group.command_for("id") == ["conway", "stake-pool", "id"]


@pytest.mark.asyncio
async def test_execute_with_network_appends_network_flags():
    binary = _fake_binary(network=Network.PREVIEW)
    group = _PoolCommands(binary)

    assert await group.execute_with_network("id", ["--cold-verification-key-file", "cold.vkey"]) == "ok"

    binary.run_command.assert_awaited_once_with(
        ["conway", "stake-pool", "id", "--cold-verification-key-file", "cold.vkey", "--testnet-magic", "2"]
    )


@pytest.mark.asyncio
async def test_execute_bytes_uses_bytes_runner():
    binary = _fake_binary()
    group = CommandGroup(binary, ["transaction"])

    assert await group.execute_bytes("view", ["--tx-file", "tx.raw"]) == b"ok"
    binary.run_command_bytes.assert_awaited_once_with(["transaction", "view", "--tx-file", "tx.raw"])


def test_split_lines_drops_blank_lines():
    assert split_lines("pool1a\n\n  \npool1b\n") == ["pool1a", "pool1b"]


def test_parse_int_token():
    assert parse_int_token("Estimated transaction fee: 171793") == 171793
    assert parse_int_token("171793 Lovelace", last=False) == 171793


@pytest.mark.parametrize("output", ["", "fee: unknown"])
def test_parse_int_token_rejects_non_integers(output):
    with pytest.raises(InvalidOutputError):
        parse_int_token(output)


def test_flag_helpers():
    assert optional_flag("--port", 3001) == ["--port", "3001"]
    assert optional_flag("--port", None) == []
    assert optional_flag("--since", "origin") == ["--since", "origin"]
    assert switch("--validate-db", True) == ["--validate-db"]
    assert switch("--validate-db", None) == []
