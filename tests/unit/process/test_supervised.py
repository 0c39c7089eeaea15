import asyncio
import logging

import pytest

from cardano_tools.errors import CardanoToolsError, CommandFailedError, ProcessAlreadyRunningError
from cardano_tools.process import ProcessState, SupervisedProcess, liveness
from tests.helpers.fake_binaries import posix_only
from tests.helpers.spy_runner import SpyRunner

pytestmark = posix_only


@pytest.fixture
def daemon_script(make_script):
    return make_script("exec sleep 30", name="fake-daemon")


@pytest.mark.asyncio
async def test_start_then_stop(daemon_script):
    process = SupervisedProcess(daemon_script, grace_period=0.5)
    assert process.state is ProcessState.NOT_STARTED

    await process.start(["run", "--config", "config.json"])
    try:
        assert process.is_running
        assert process.state is ProcessState.RUNNING
        assert process.pid is not None
        assert process.arguments == ["run", "--config", "config.json"]
    finally:
        await process.stop()

    assert not process.is_running
    assert process.state is ProcessState.TERMINATED


@pytest.mark.asyncio
async def test_second_start_while_running_is_rejected(daemon_script):
    process = SupervisedProcess(daemon_script, grace_period=0.5)
    await process.start()
    first_pid = process.pid
    try:
        with pytest.raises(ProcessAlreadyRunningError):
            await process.start()
        assert process.pid == first_pid
    finally:
        await process.stop()


@pytest.mark.asyncio
async def test_restart_after_termination_requires_new_handle(daemon_script):
    process = SupervisedProcess(daemon_script, grace_period=0.5)
    await process.start()
    await process.stop()

    with pytest.raises(CardanoToolsError, match="create a new handle"):
        await process.start()


@pytest.mark.asyncio
async def test_stop_escalates_to_kill(make_script, tmp_path, caplog):
    ready = tmp_path / "trap-installed"
    script = make_script(
        f"trap '' INT\ntouch \"{ready}\"\nwhile :; do sleep 0.1; done",
        name="stubborn-daemon",
    )
    process = SupervisedProcess(script, grace_period=0.3)
    await process.start()
    # SIGINT must not arrive before the shell has installed its trap
    for _ in range(100):
        if ready.exists():
            break
        await asyncio.sleep(0.05)
    assert ready.exists()

    with caplog.at_level(logging.WARNING):
        await process.stop()

    assert not process.is_running
    assert "did not exit within" in caplog.text
    await asyncio.wait_for(process.wait(), timeout=5)
    assert process.returncode is not None


@pytest.mark.asyncio
async def test_stop_without_start_is_noop(daemon_script):
    process = SupervisedProcess(daemon_script)

    await process.stop()

    assert process.state is ProcessState.NOT_STARTED
    assert await process.wait() is None


@pytest.mark.asyncio
async def test_stop_without_child_handle_is_noop(daemon_script, monkeypatch):
    monkeypatch.setattr(SupervisedProcess, "is_running", property(lambda self: True))
    process = SupervisedProcess(daemon_script)

    await process.stop()

    assert process.pid is None


@pytest.mark.asyncio
async def test_wait_returns_exit_code(make_script):
    script = make_script("sleep 0.2\nexit 7")
    process = SupervisedProcess(script)
    await process.start()

    assert await process.wait() == 7
    assert not process.is_running


@pytest.mark.asyncio
async def test_show_output_waits_for_exit(make_script, tmp_path):
    marker = tmp_path / "env.txt"
    script = make_script(f'echo "$CARDANO_NODE_SOCKET_PATH" > "{marker}"\nexit 0')
    process = SupervisedProcess(script, show_output=True, env={"CARDANO_NODE_SOCKET_PATH": "/ipc/node.socket"})

    await process.start()

    assert process.returncode == 0
    assert process.state is ProcessState.TERMINATED
    assert marker.read_text().strip() == "/ipc/node.socket"


@pytest.mark.asyncio
async def test_stale_os_state_reads_as_terminated(daemon_script, monkeypatch):
    process = SupervisedProcess(daemon_script, grace_period=0.5)
    await process.start()
    try:
        assert process.returncode is None

        def _gone(pid, sig):
            raise ProcessLookupError

        monkeypatch.setattr(liveness.os, "kill", _gone)
        assert not process.is_running
        assert process.state is ProcessState.TERMINATED
    finally:
        monkeypatch.undo()
        process._force_kill()
        await process.wait()


@pytest.mark.asyncio
async def test_launch_failure_is_command_failed(tmp_path):
    process = SupervisedProcess(tmp_path / "missing-binary")

    with pytest.raises(CommandFailedError):
        await process.start()

    assert process.state is ProcessState.NOT_STARTED


@pytest.mark.asyncio
async def test_version_runs_one_shot(stub_binary):
    runner = SpyRunner("cardano-node 10.1.4 - linux-x86_64 - ghc-8.10")
    process = SupervisedProcess(stub_binary, runner=runner)

    assert await process.version() == "cardano-node 10.1.4 - linux-x86_64 - ghc-8.10"
    assert runner.arguments == [["--version"]]
    assert process.state is ProcessState.NOT_STARTED
