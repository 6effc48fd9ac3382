import logging

import pytest

from clawion import config
from clawion.lib import paths


def test_defaults_without_config_file(test_workspace):
    cfg = config.load_config()
    assert cfg["log_level"] == "WARNING"
    assert cfg["ui"] == {"host": "127.0.0.1", "port": 3000}
    assert config.log_level() == logging.WARNING


def test_config_file_merges_over_defaults(test_workspace):
    paths.config_file().write_text("log_level: debug\nui:\n  port: 4000\n")
    config.clear_cache()

    cfg = config.load_config()
    assert cfg["ui"] == {"host": "127.0.0.1", "port": 4000}
    assert config.log_level() == logging.DEBUG


def test_env_overrides_config_file(test_workspace, monkeypatch):
    paths.config_file().write_text("log_level: DEBUG\n")
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "error")
    config.clear_cache()

    assert config.log_level() == logging.ERROR


def test_unknown_level_falls_back(test_workspace, monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
    config.clear_cache()
    assert config.log_level() == logging.WARNING


def test_invalid_ui_section_fails_fast(test_workspace):
    paths.config_file().write_text("ui: 3000\n")
    config.clear_cache()
    with pytest.raises(ValueError, match="'ui' must be a dict"):
        config.load_config()


def test_workspace_precedence(monkeypatch, tmp_path):
    monkeypatch.setenv(paths.WORKSPACE_ENV, str(tmp_path / "env"))
    assert paths.workspace_root() == tmp_path / "env"
    assert paths.workspace_root(str(tmp_path / "explicit")) == tmp_path / "explicit"

    monkeypatch.delenv(paths.WORKSPACE_ENV)
    assert paths.workspace_root().name == ".clawion"
