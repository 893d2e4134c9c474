"""Tests for configuration loading and CLI overrides."""
import json
from types import SimpleNamespace

from cli_config import apply_cli_overrides
from config import MetadataConfig, load_config


def test_defaults_without_sources():
    config = load_config(env={})
    assert config == MetadataConfig()
    assert config.debug is False
    assert config.timeout is None
    assert config.temp_prefix == "pom-"


def test_yaml_metadata_section(tmp_path):
    path = tmp_path / "purlbom.yml"
    path.write_text("metadata:\n  debug: true\n  timeout: 12\n  temp_prefix: bom-\n", encoding="utf-8")

    config = load_config(str(path), env={})

    assert config.debug is True
    assert config.timeout == 12.0
    assert config.temp_prefix == "bom-"


def test_json_top_level(tmp_path):
    path = tmp_path / "purlbom.json"
    path.write_text(json.dumps({"debug": True}), encoding="utf-8")

    assert load_config(str(path), env={}).debug is True


def test_config_path_from_environment(tmp_path):
    path = tmp_path / "purlbom.yaml"
    path.write_text("timeout: 7\n", encoding="utf-8")

    config = load_config(env={"PURLBOM_CONFIG": str(path)})

    assert config.timeout == 7.0


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "purlbom.yml"
    path.write_text("debug: false\ntimeout: 12\n", encoding="utf-8")

    config = load_config(str(path), env={"PURLBOM_DEBUG": "1", "PURLBOM_TIMEOUT": "3.5"})

    assert config.debug is True
    assert config.timeout == 3.5


def test_missing_file_keeps_defaults(tmp_path, caplog):
    config = load_config(str(tmp_path / "absent.yml"), env={})

    assert config == MetadataConfig()
    assert "Unable to read config file" in caplog.text


def test_malformed_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("metadata: [unterminated\n", encoding="utf-8")

    assert load_config(str(path), env={}) == MetadataConfig()


def test_invalid_timeout_is_ignored(caplog):
    config = load_config(env={"PURLBOM_TIMEOUT": "soon"})

    assert config.timeout is None
    assert "Ignoring invalid timeout" in caplog.text


def test_cli_overrides_take_precedence():
    base = MetadataConfig(debug=False, timeout=10.0)
    args = SimpleNamespace(DEBUG=True, TIMEOUT=2.0)

    config = apply_cli_overrides(base, args)

    assert config.debug is True
    assert config.timeout == 2.0


def test_cli_without_flags_keeps_config():
    base = MetadataConfig(debug=True, timeout=10.0)
    args = SimpleNamespace(DEBUG=False, TIMEOUT=None)

    assert apply_cli_overrides(base, args) is base
