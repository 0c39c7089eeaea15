import asyncio
import logging
import os
import time

import pytest

from cardano_tools.errors import CommandFailedError, InvalidOutputError
from cardano_tools.process import CommandRunner, build_environment, probe_pid
from tests.helpers.fake_binaries import posix_only

pytestmark = posix_only


@pytest.mark.asyncio
async def test_run_returns_trimmed_stdout(make_script):
    script = make_script('echo "  hello  "')

    output = await CommandRunner().run(script)

    assert output == "hello"


@pytest.mark.asyncio
async def test_run_passes_arguments_in_order(make_script):
    script = make_script('printf "%s|" "$@"')

    output = await CommandRunner().run(script, ["conway", "query", "tip", "--testnet-magic", "1"])

    assert output == "conway|query|tip|--testnet-magic|1|"


@pytest.mark.asyncio
async def test_run_uses_working_directory(make_script, tmp_path):
    workdir = tmp_path / "work"
    workdir.mkdir()
    script = make_script("pwd")

    output = await CommandRunner().run(script, working_directory=workdir)

    assert output == str(workdir.resolve())


@pytest.mark.asyncio
async def test_run_applies_environment_overrides(make_script, monkeypatch):
    monkeypatch.setenv("INHERITED_VALUE", "parent")
    script = make_script('echo "$CARDANO_NODE_SOCKET_PATH $INHERITED_VALUE"')

    output = await CommandRunner().run(script, env={"CARDANO_NODE_SOCKET_PATH": "/ipc/node.socket"})

    assert output == "/ipc/node.socket parent"


@pytest.mark.asyncio
async def test_non_zero_exit_reports_stderr(make_script, caplog):
    script = make_script('echo "boom" >&2\nexit 3')

    with caplog.at_level(logging.ERROR):
        with pytest.raises(CommandFailedError) as excinfo:
            await CommandRunner().run(script, ["submit"])

    assert excinfo.value.detail == "boom"
    assert excinfo.value.command == [str(script), "submit"]
    assert "CLI command failed with exit code 3" in caplog.text


@pytest.mark.asyncio
async def test_non_zero_exit_without_stderr_is_unknown_error(make_script):
    script = make_script("exit 1")

    with pytest.raises(CommandFailedError, match="Error: Unknown error"):
        await CommandRunner().run(script)


@pytest.mark.asyncio
async def test_undecodable_stderr_is_unknown_error(make_script):
    script = make_script("printf '\\377\\376' >&2\nexit 2")

    with pytest.raises(CommandFailedError) as excinfo:
        await CommandRunner().run(script)

    assert excinfo.value.detail == "Unknown error"


@pytest.mark.asyncio
async def test_launch_failure_is_command_failed(tmp_path):
    with pytest.raises(CommandFailedError) as excinfo:
        await CommandRunner().run(tmp_path / "does-not-exist")

    assert excinfo.value.command[0] == str(tmp_path / "does-not-exist")


@pytest.mark.asyncio
async def test_timeout_kills_child(make_script):
    script = make_script("exec sleep 30")

    started = time.monotonic()
    with pytest.raises(CommandFailedError, match="timed out"):
        await CommandRunner().run(script, timeout=0.2)

    assert time.monotonic() - started < 10


@pytest.mark.asyncio
async def test_undecodable_output_raises_invalid_output(make_script):
    script = make_script(r"printf '\377\376'")

    with pytest.raises(InvalidOutputError):
        await CommandRunner().run(script)

    assert await CommandRunner().run_bytes(script) == b"\xff\xfe"


@pytest.mark.asyncio
async def test_concurrent_invocations_do_not_serialize(make_script):
    script = make_script("sleep 0.5\necho done")
    runner = CommandRunner()

    started = time.monotonic()
    results = await asyncio.gather(*(runner.run(script) for _ in range(4)))

    assert results == ["done"] * 4
    assert time.monotonic() - started < 1.8


@pytest.mark.asyncio
async def test_cancellation_kills_child(make_script, tmp_path):
    pidfile = tmp_path / "child.pid"
    script = make_script(f'echo $$ > "{pidfile}"\nexec sleep 30')

    task = asyncio.create_task(CommandRunner().run(script))
    for _ in range(100):
        if pidfile.exists() and pidfile.read_text().strip():
            break
        await asyncio.sleep(0.05)
    pid = int(pidfile.read_text())

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    for _ in range(100):
        if not probe_pid(pid, os_reports_running=False):
            break
        await asyncio.sleep(0.05)
    assert not probe_pid(pid, os_reports_running=False)


@pytest.mark.asyncio
async def test_cancellation_reaps_child_before_raising(make_script, tmp_path):
    pidfile = tmp_path / "child.pid"
    script = make_script(f'echo $$ > "{pidfile}"\nexec sleep 30')

    task = asyncio.create_task(CommandRunner().run(script))
    for _ in range(100):
        if pidfile.exists() and pidfile.read_text().strip():
            break
        await asyncio.sleep(0.05)
    pid = int(pidfile.read_text())

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    # already waited on, so the pid is gone rather than a zombie
    with pytest.raises(ProcessLookupError):
        os.kill(pid, 0)


def test_build_environment_merges_over_parent(monkeypatch):
    monkeypatch.setenv("PARENT_ONLY", "1")

    assert build_environment(None) is None
    assert build_environment({}) is None

    merged = build_environment({"GENESIS_VERIFICATION_KEY": "abc"})
    assert merged["PARENT_ONLY"] == "1"
    assert merged["GENESIS_VERIFICATION_KEY"] == "abc"
