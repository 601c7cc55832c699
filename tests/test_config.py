#!/usr/bin/env python3
"""
Tests for config module.
"""

import os

from treino_core.config import load_config, get_config_value, get_data_file, resolve_path
from treino_core.constants import (
    STORAGE_KEY, DEFAULT_DATA_FILE, DEFAULT_LOG_LEVEL, DATA_FILE_ENV_VAR
)


def test_load_config_missing_file(tmp_path):
    """Test a missing config file gives the defaults."""
    config = load_config(str(tmp_path / "missing.yaml"))
    assert config["storage"]["key"] == STORAGE_KEY
    assert config["storage"]["data_file"] == DEFAULT_DATA_FILE
    assert config["logging"]["level"] == DEFAULT_LOG_LEVEL
    assert config["export"]["directory"] == "."


def test_load_config_with_existing_file(tmp_path):
    """Test loading config from an existing file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "storage:\n"
        "  data_file: ~/treino.json\n"
        "export:\n"
        "  directory: /tmp/exports\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    config = load_config(str(config_path))
    assert config["storage"]["data_file"] == "~/treino.json"
    assert config["storage"]["key"] == STORAGE_KEY
    assert config["export"]["directory"] == "/tmp/exports"
    assert config["logging"]["level"] == "DEBUG"


def test_load_config_invalid_values(tmp_path):
    """Test invalid values fall back to defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("logging:\n  level: loud\nstorage:\n  key: '  '\n", encoding="utf-8")
    config = load_config(str(config_path))
    assert config["logging"]["level"] == DEFAULT_LOG_LEVEL
    assert config["storage"]["key"] == STORAGE_KEY


def test_load_config_not_a_mapping(tmp_path):
    """Test a config file that is not a mapping is ignored."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    config = load_config(str(config_path))
    assert config["storage"]["key"] == STORAGE_KEY


def test_get_config_value():
    """Test retrieval of config values with defaults."""
    config = {
        "section": {
            "key": "value"
        },
        "top_level": "top value"
    }

    assert get_config_value(config, "section.key") == "value"
    assert get_config_value(config, "top_level") == "top value"
    assert get_config_value(config, "missing", "default") == "default"
    assert get_config_value(config, "section.missing", "default") == "default"
    assert get_config_value(config, "missing.key", "default") == "default"


def test_resolve_path():
    """Test path resolution functionality."""
    home = os.path.expanduser("~")
    assert resolve_path("~/test") == os.path.join(home, "test")
    assert resolve_path("/absolute/path") == "/absolute/path"
    assert resolve_path("relative/path") == "relative/path"
    assert resolve_path("") == ""
    assert resolve_path(None) is None


def test_get_data_file_precedence(monkeypatch):
    """Test command line beats environment, which beats config."""
    config = {"storage": {"data_file": "/from/config.json"}}
    monkeypatch.delenv(DATA_FILE_ENV_VAR, raising=False)
    assert get_data_file(config) == "/from/config.json"

    monkeypatch.setenv(DATA_FILE_ENV_VAR, "/from/env.json")
    assert get_data_file(config) == "/from/env.json"
    assert get_data_file(config, "/from/cli.json") == "/from/cli.json"

    monkeypatch.delenv(DATA_FILE_ENV_VAR)
    assert get_data_file({}) == resolve_path(DEFAULT_DATA_FILE)
