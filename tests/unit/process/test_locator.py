import pytest

from cardano_tools.errors import BinaryNotFoundError
from cardano_tools.process.locator import ensure_working_directory, locate_binary, validate_binary
from tests.helpers.fake_binaries import posix_only


def test_locate_binary_uses_search_path(monkeypatch, tmp_path):
    monkeypatch.setattr("cardano_tools.process.locator.shutil.which", lambda name: f"/opt/bin/{name}")

    assert str(locate_binary("cardano-cli")) == "/opt/bin/cardano-cli"


def test_locate_binary_missing(monkeypatch):
    monkeypatch.setattr("cardano_tools.process.locator.shutil.which", lambda name: None)

    with pytest.raises(BinaryNotFoundError, match="cardano-node not found on PATH"):
        locate_binary("cardano-node")


@posix_only
def test_validate_binary_accepts_executable(make_script):
    script = make_script("exit 0")

    assert validate_binary(script, "fake") == script


def test_validate_binary_missing_file(tmp_path):
    with pytest.raises(BinaryNotFoundError, match="binary file not found"):
        validate_binary(tmp_path / "absent", "kupo")


def test_validate_binary_rejects_directory(tmp_path):
    with pytest.raises(BinaryNotFoundError, match="binary file not found"):
        validate_binary(tmp_path)


@posix_only
def test_validate_binary_not_executable(tmp_path):
    plain = tmp_path / "ogmios"
    plain.write_text("data")
    plain.chmod(0o644)

    with pytest.raises(BinaryNotFoundError, match="not executable"):
        validate_binary(plain)


def test_ensure_working_directory_creates_parents(tmp_path):
    target = tmp_path / "a" / "b"

    assert ensure_working_directory(target) == target
    assert target.is_dir()
    assert ensure_working_directory(target) == target
