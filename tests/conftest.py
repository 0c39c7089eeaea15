"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from cardano_tools.config import runtime
from tests.helpers.fake_binaries import write_script
from tests.helpers.spy_runner import SpyRunner


@pytest.fixture(autouse=True)
def reset_runtime_defaults():
    """Keep .env files in the working tree from leaking into tests."""
    runtime._DEFAULT_VALUES = {}
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture
def make_script(tmp_path: Path) -> Callable[..., Path]:
    def _make(body: str, name: str = "fake-binary") -> Path:
        return write_script(tmp_path, body, name)

    return _make


@pytest.fixture
def stub_binary(make_script) -> Path:
    """An executable file for wrappers whose commands go through a SpyRunner."""
    return make_script("exit 0", name="stub-binary")


@pytest.fixture
def spy_runner() -> SpyRunner:
    return SpyRunner()


@pytest.fixture
def clean_cardano_env(monkeypatch):
    """Remove settings overlay variables that a developer machine may export."""
    for name in list(os.environ):
        if name.startswith(("CARDANO_", "OGMIOS_", "KUPO_", "MITHRIL_")):
            monkeypatch.delenv(name, raising=False)
    for name in ("NETWORK", "AGGREGATOR_ENDPOINT", "GENESIS_VERIFICATION_KEY", "ANCILLARY_VERIFICATION_KEY"):
        monkeypatch.delenv(name, raising=False)
