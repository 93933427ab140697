"""
Tests for installer-config.json loading.
"""

import json

import pytest

from hytale_installer.services import settings
from hytale_installer.services.settings import DEFAULT_CONFIG, InstallerConfig

DEFAULTS = {
    "startServer": True,
    "cleanUp": True,
    "downloaderArgs": "",
    "javaArgs": "-Xms2G -Xmx4G -XX:AOTCache=HytaleServer.aot",
    "hytaleArgs": "--assets Assets.zip --bind 5520",
}


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "installer-config.json"


def test_fresh_directory_creates_default_file(config_file):
    cfg = settings.load(str(config_file))

    assert cfg == DEFAULT_CONFIG
    assert config_file.is_file()
    assert json.loads(config_file.read_text(encoding="utf-8")) == DEFAULTS


def test_default_file_is_human_readable(config_file):
    settings.load(str(config_file))
    text = config_file.read_text(encoding="utf-8")
    assert text.startswith("{\n  \"startServer\": true,")


def test_second_load_returns_what_was_written(config_file):
    first = settings.load(str(config_file))
    written = config_file.read_text(encoding="utf-8")

    second = settings.load(str(config_file))

    assert second == first
    assert config_file.read_text(encoding="utf-8") == written


def test_partial_override_keeps_other_defaults(config_file):
    config_file.write_text(json.dumps({"startServer": False}), encoding="utf-8")

    cfg = settings.load(str(config_file))

    assert cfg.start_server is False
    assert cfg.to_file_dict() == {**DEFAULTS, "startServer": False}


def test_unknown_keys_are_ignored(config_file):
    config_file.write_text(
        json.dumps({"javaArgs": "-Xmx8G", "somethingElse": 42}), encoding="utf-8"
    )

    cfg = settings.load(str(config_file))

    assert cfg.java_args == "-Xmx8G"
    assert "somethingElse" not in cfg.to_file_dict()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"startServer": {"nested": True}}),
    ],
)
def test_malformed_file_falls_back_to_defaults(config_file, content, caplog):
    config_file.write_text(content, encoding="utf-8")

    cfg = settings.load(str(config_file))

    assert cfg == DEFAULT_CONFIG
    assert config_file.read_text(encoding="utf-8") == content
    assert any("Failed to load installer-config.json" in r.getMessage() for r in caplog.records)


def test_config_is_immutable():
    cfg = InstallerConfig()
    with pytest.raises(Exception):
        cfg.start_server = False


def test_fields_accept_python_names():
    cfg = InstallerConfig(clean_up=False)
    assert cfg.to_file_dict()["cleanUp"] is False
