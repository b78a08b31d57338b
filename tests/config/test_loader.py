"""Tests for loading tester settings from TOML."""
import logging

import pytest

from xmltester.config import loader
from xmltester.config.loader import ConfigManager, resolve_config_file
from xmltester.config.models import TesterSettings

CONFIG_TOML = """
[tester]
default_namespace = "urn:example"
template_include_namespaces = true

[tester.compile_defaults]
check_values = false
sloppy_integers = true
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "xmltester.toml"
    path.write_text(CONFIG_TOML)
    return path


def test_load_settings(config_file):
    settings = ConfigManager(config_file).get_settings()
    assert settings.default_namespace == "urn:example"
    assert settings.template_include_namespaces is True
    assert settings.compile_defaults.check_values is False
    assert settings.compile_defaults.as_overrides() == {"check_values": False, "sloppy_integers": True}


def test_missing_file_gives_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="xmltester"):
        settings = ConfigManager(tmp_path / "absent.toml").get_settings()
    assert settings == TesterSettings()
    assert "not found" in caplog.text


def test_invalid_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[tester\n")
    with pytest.raises(ValueError, match="Error decoding TOML"):
        ConfigManager(path)


def test_overrides_are_coerced(config_file):
    settings = ConfigManager(config_file).get_settings([
        "tester.default_namespace=urn:other",
        "tester.compile_defaults.check_values=true",
        "tester.compile_defaults.max_depth=5",
        "tester.compile_defaults.ratio=0.5",
    ])
    assert settings.default_namespace == "urn:other"
    assert settings.compile_defaults.as_overrides() == {
        "check_values": True,
        "sloppy_integers": True,
        "max_depth": 5,
        "ratio": 0.5,
    }


def test_invalid_overrides_are_skipped(config_file, caplog):
    manager = ConfigManager(config_file)
    with caplog.at_level(logging.WARNING, logger="xmltester"):
        settings = manager.get_settings([
            "no-equals-sign",
            "tester.default_namespace.nested=1",
        ])
    assert settings.default_namespace == "urn:example"
    assert "Invalid override format" in caplog.text
    assert "Could not apply override" in caplog.text


def test_overrides_do_not_modify_loaded_config(config_file):
    manager = ConfigManager(config_file)
    manager.get_settings(["tester.default_namespace=urn:other"])
    assert manager.get_settings().default_namespace == "urn:example"


def test_invalid_settings(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[tester]\ntemplate_include_namespaces = [1, 2]\n")
    with pytest.raises(ValueError, match="Validation error for tester settings"):
        ConfigManager(path).get_settings()


@pytest.fixture
def user_dir(tmp_path, monkeypatch):
    path = tmp_path / "user"
    monkeypatch.setattr(loader, "user_config_path", lambda app_name: path)
    monkeypatch.chdir(tmp_path)
    return path


def test_explicit_config_path_wins(tmp_path, user_dir):
    (tmp_path / "xmltester.toml").write_text("")
    assert resolve_config_file(tmp_path / "other.toml") == tmp_path / "other.toml"
    assert resolve_config_file(str(tmp_path / "other.toml")) == tmp_path / "other.toml"


def test_project_config_preferred_over_user_config(tmp_path, user_dir):
    user_dir.mkdir()
    (user_dir / "config.toml").write_text("")
    (tmp_path / "xmltester.toml").write_text("")
    assert resolve_config_file() == tmp_path / "xmltester.toml"


def test_user_config_used_without_project_config(user_dir):
    user_dir.mkdir()
    (user_dir / "config.toml").write_text("")
    assert resolve_config_file() == user_dir / "config.toml"


def test_missing_config_falls_back_to_user_path(user_dir):
    assert resolve_config_file() == user_dir / "config.toml"
    settings = ConfigManager(resolve_config_file()).get_settings()
    assert settings == TesterSettings()
