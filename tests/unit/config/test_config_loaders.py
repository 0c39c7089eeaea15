import pytest

from cardano_tools.config import ConfigurationError
from cardano_tools.config.runtime_helpers import DotenvLoader, JsonConfigLoader


def test_dotenv_loader_parses_comments_exports_and_quotes(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# node settings\n"
        "\n"
        "export CARDANO_SOCKET_PATH=/ipc/node.socket\n"
        "NETWORK='preprod'\n"
        'CARDANO_TOOLS_LOG_LEVEL="DEBUG"\n'
        "not a pair\n"
        "=orphan\n"
    )

    values = DotenvLoader.load_from_file(env_file)

    assert values == {
        "CARDANO_SOCKET_PATH": "/ipc/node.socket",
        "NETWORK": "preprod",
        "CARDANO_TOOLS_LOG_LEVEL": "DEBUG",
    }


def test_dotenv_loader_missing_file_is_empty(tmp_path):
    assert DotenvLoader.load_from_file(tmp_path / "absent.env") == {}


def test_json_loader_normalizes_scalars(tmp_path):
    path = tmp_path / "runtime_env.json"
    path.write_text('{"PORT": 3001, "VALIDATE": true, "EMPTY": null, "NAME": "relay"}')

    assert JsonConfigLoader.load_from_file(path) == {
        "PORT": "3001",
        "VALIDATE": "true",
        "EMPTY": "",
        "NAME": "relay",
    }


def test_json_loader_rejects_nested_values(tmp_path):
    path = tmp_path / "runtime_env.json"
    path.write_text('{"MATCHES": ["*"]}')

    with pytest.raises(ConfigurationError, match="MATCHES"):
        JsonConfigLoader.load_from_file(path)


@pytest.mark.parametrize("payload", ["{not-json", "[1, 2]"])
def test_json_loader_rejects_invalid_documents(tmp_path, payload):
    path = tmp_path / "config.json"
    path.write_text(payload)

    with pytest.raises(ConfigurationError):
        JsonConfigLoader.load_document(path)


def test_json_loader_document_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonConfigLoader.load_document(tmp_path / "missing.json")
