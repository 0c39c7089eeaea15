from pathlib import Path

import orjson
import pytest

from cardano_tools.config import ConfigurationError, Era, Network
from cardano_tools.config.settings import CardanoSettings, KupoSettings, ToolSettings
from cardano_tools.errors import FileAlreadyExistsError, MissingFileError


def _write_config(path: Path, payload: dict) -> Path:
    path.write_bytes(orjson.dumps(payload))
    return path


def test_from_mapping_coerces_section_values():
    settings = ToolSettings.from_mapping(
        {
            "cardano": {
                "cli": "/opt/cardano/bin/cardano-cli",
                "socket": "/ipc/node.socket",
                "port": "3001",
                "validate_db": "yes",
                "network": "preprod",
                "era": "babbage",
                "unknown_key": "ignored",
            },
            "kupo": {"matches": "addr1*, stake1*", "port": 1442},
        }
    )

    assert settings.cardano.cli == Path("/opt/cardano/bin/cardano-cli")
    assert settings.cardano.port == 3001
    assert settings.cardano.validate_db is True
    assert settings.cardano.network == Network.PREPROD
    assert settings.cardano.era is Era.BABBAGE
    assert settings.cardano.ttl_buffer == 1000
    assert settings.kupo == KupoSettings(matches=("addr1*", "stake1*"), port=1442)
    assert settings.ogmios is None
    assert settings.mithril is None


def test_from_mapping_requires_cardano_section():
    with pytest.raises(ConfigurationError, match="cardano"):
        ToolSettings.from_mapping({"ogmios": {}})


@pytest.mark.parametrize(
    "section",
    [
        {"port": "not-a-port"},
        {"port": True},
        {"socket": ""},
        {"validate_db": "perhaps"},
        {"era": "voltaire"},
        {"ttl_buffer": -1},
    ],
)
def test_from_mapping_rejects_malformed_values(section):
    with pytest.raises(ConfigurationError):
        ToolSettings.from_mapping({"cardano": section})


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MissingFileError):
        ToolSettings.load(tmp_path / "missing.json")


def test_load_applies_environment_overrides(tmp_path, monkeypatch, clean_cardano_env):
    config_path = _write_config(
        tmp_path / "config.json",
        {"cardano": {"socket": "/ipc/file.socket", "port": 3001}, "kupo": {"port": 1442}},
    )
    monkeypatch.setenv("CARDANO_PORT", "6000")
    monkeypatch.setenv("KUPO_IN_MEMORY", "true")
    monkeypatch.setenv("OGMIOS_PORT", "1338")

    settings = ToolSettings.load(config_path)

    assert settings.cardano.port == 6000
    assert settings.cardano.socket == Path("/ipc/file.socket")
    assert settings.kupo.in_memory is True
    # Sections absent from the file are not conjured by the overlay
    assert settings.ogmios is None


def test_load_reads_deployment_variable_names(tmp_path, monkeypatch, clean_cardano_env):
    config_path = _write_config(
        tmp_path / "config.json",
        {
            "cardano": {"socket": "/file/node.socket", "database": "/file/db", "network": "mainnet"},
            "mithril": {"aggregator_endpoint": "https://file.example"},
        },
    )
    monkeypatch.setenv("CARDANO_SOCKET_PATH", "/env/node.socket")
    monkeypatch.setenv("CARDANO_DATABASE_PATH", "/env/db")
    monkeypatch.setenv("CARDANO_BIND_ADDR", "127.0.0.1")
    monkeypatch.setenv("NETWORK", "preview")
    monkeypatch.setenv("AGGREGATOR_ENDPOINT", "https://env.example")

    settings = ToolSettings.load(config_path)

    assert settings.cardano.socket == Path("/env/node.socket")
    assert settings.cardano.database == Path("/env/db")
    assert settings.cardano.host_addr == "127.0.0.1"
    assert settings.cardano.network == Network.PREVIEW
    assert settings.mithril.aggregator_endpoint == "https://env.example"


def test_deployment_name_wins_over_section_field_name(tmp_path, monkeypatch, clean_cardano_env):
    config_path = _write_config(tmp_path / "config.json", {"cardano": {"socket": "/file/node.socket"}})
    monkeypatch.setenv("CARDANO_SOCKET", "/generated/node.socket")
    monkeypatch.setenv("CARDANO_SOCKET_PATH", "/deployment/node.socket")

    assert ToolSettings.load(config_path).cardano.socket == Path("/deployment/node.socket")

    monkeypatch.delenv("CARDANO_SOCKET_PATH")

    assert ToolSettings.load(config_path).cardano.socket == Path("/generated/node.socket")


def test_load_splits_list_overrides(tmp_path, monkeypatch, clean_cardano_env):
    config_path = _write_config(tmp_path / "config.json", {"cardano": {}, "kupo": {"matches": ["*"]}})
    monkeypatch.setenv("KUPO_MATCHES", "addr1*, stake1* ,,addr1*")

    settings = ToolSettings.load(config_path)

    assert settings.kupo.matches == ("addr1*", "stake1*")


def test_save_refuses_to_overwrite(tmp_path):
    target = _write_config(tmp_path / "config.json", {"cardano": {}})

    with pytest.raises(FileAlreadyExistsError):
        ToolSettings(cardano=CardanoSettings()).save(target)


def test_save_writes_loadable_document(tmp_path, clean_cardano_env):
    settings = ToolSettings(
        cardano=CardanoSettings(
            socket=Path("/ipc/node.socket"),
            network=Network.custom(42),
            era=Era.BABBAGE,
            ttl_buffer=500,
        ),
        kupo=KupoSettings(matches=("*",)),
    )
    target = tmp_path / "saved.json"

    settings.save(target)

    document = orjson.loads(target.read_bytes())
    assert document["cardano"]["network"] == 42
    assert document["cardano"]["era"] == "babbage"
    assert document["kupo"]["matches"] == ["*"]
    assert document["mithril"] is None
    assert ToolSettings.load(target) == settings


def test_save_leaves_only_the_target_behind(tmp_path, clean_cardano_env):
    target = tmp_path / "saved.json"

    ToolSettings(cardano=CardanoSettings()).save(target)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["saved.json"]


def test_save_removes_partial_file_when_write_fails(tmp_path, monkeypatch):
    real_open = open

    class _FullDisk:
        def __init__(self, path, mode):
            self._handle = real_open(path, mode)

        def __enter__(self):
            return self

        def __exit__(self, *exc_info):
            self._handle.close()
            return False

        def write(self, data):
            raise OSError(28, "No space left on device")

    monkeypatch.setattr("cardano_tools.config.settings.open", _FullDisk, raising=False)
    target = tmp_path / "saved.json"

    with pytest.raises(OSError, match="No space left"):
        ToolSettings(cardano=CardanoSettings()).save(target)

    assert not target.exists()


def test_from_environment_reads_deployment_variables(monkeypatch, tmp_path, clean_cardano_env):
    monkeypatch.setattr("cardano_tools.process.locator.shutil.which", lambda name: None)
    monkeypatch.setenv("CARDANO_SOCKET_PATH", str(tmp_path / "node.socket"))
    monkeypatch.setenv("CARDANO_PORT", "3002")
    monkeypatch.setenv("NETWORK", "preview")
    monkeypatch.chdir(tmp_path)

    settings = ToolSettings.from_environment()

    assert settings.cardano.cli is None
    assert settings.cardano.socket == tmp_path / "node.socket"
    assert settings.cardano.port == 3002
    assert settings.cardano.network == Network.PREVIEW
    assert settings.cardano.ttl_buffer == 3600
    assert settings.cardano.show_output is True
    assert settings.ogmios is None
    assert settings.kupo is None
    assert settings.mithril is None


def test_from_environment_builds_optional_sections_when_binary_configured(monkeypatch, tmp_path, clean_cardano_env):
    monkeypatch.setattr("cardano_tools.process.locator.shutil.which", lambda name: None)
    monkeypatch.setenv("OGMIOS_BINARY", "/opt/ogmios")
    monkeypatch.setenv("MITHRIL_BINARY", "/opt/mithril-client")
    monkeypatch.setenv("AGGREGATOR_ENDPOINT", "https://aggregator.example")

    settings = ToolSettings.from_environment()

    assert settings.ogmios.binary == Path("/opt/ogmios")
    assert settings.ogmios.port == 1337
    assert settings.mithril.aggregator_endpoint == "https://aggregator.example"
