"""
Configuration tests - environment overrides and validation.
"""

import importlib
import os
from unittest.mock import patch

import pytest

from src.core import config


@pytest.fixture
def reload_config():
    """Reload config under patched environment and restore it afterwards."""
    def _reload(**env):
        with patch.dict(os.environ, env):
            importlib.reload(config)
        return config
    yield _reload
    importlib.reload(config)


class TestConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self, reload_config):
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(config)

        assert config.CSV_DELIMITER == ","
        assert config.EXIT_COMMAND == "exit"
        assert config.LOG_LEVEL == "WARNING"
        assert config.DEBUG is False
        assert config.REPORT_SKIPPED_ROWS is True
        assert config.validate_config() == []


class TestConfigOverrides:
    """Test environment-driven overrides."""

    def test_delimiter_override(self, reload_config):
        cfg = reload_config(CSV_DELIMITER=";")

        assert cfg.get_csv_delimiter() == ";"

    def test_debug_forces_debug_level(self, reload_config):
        cfg = reload_config(DEBUG="true", LOG_LEVEL="ERROR")

        assert cfg.get_log_level() == "DEBUG"

    def test_log_level_uppercased(self, reload_config):
        cfg = reload_config(DEBUG="false", LOG_LEVEL="info")

        assert cfg.get_log_level() == "INFO"

    def test_exit_command_override(self, reload_config):
        cfg = reload_config(EXIT_COMMAND="quit")

        assert cfg.get_exit_command() == "quit"


class TestValidateConfig:
    """Test configuration validation."""

    def test_multi_char_delimiter_rejected(self, reload_config):
        cfg = reload_config(CSV_DELIMITER="::")

        issues = cfg.validate_config()

        assert any("CSV_DELIMITER" in issue for issue in issues)

    def test_unknown_log_level_rejected(self, reload_config):
        cfg = reload_config(DEBUG="false", LOG_LEVEL="CHATTY")

        assert any("LOG_LEVEL" in issue for issue in cfg.validate_config())

    def test_log_level_ignored_in_debug_mode(self, reload_config):
        cfg = reload_config(DEBUG="true", LOG_LEVEL="CHATTY")

        assert cfg.validate_config() == []
        assert cfg.get_log_level() == "DEBUG"

    @pytest.mark.parametrize("exit_command", ["quit now", " exit", "exit\t", ""])
    def test_exit_command_must_be_single_word(self, reload_config, exit_command):
        cfg = reload_config(EXIT_COMMAND=exit_command)

        assert any("EXIT_COMMAND" in issue for issue in cfg.validate_config())

    @pytest.mark.parametrize("delimiter", ['"', "\n", "\r"])
    def test_quote_and_line_break_delimiters_rejected(self, reload_config, delimiter):
        cfg = reload_config(CSV_DELIMITER=delimiter)

        assert any("CSV_DELIMITER" in issue for issue in cfg.validate_config())

    def test_delimiter_issues_names_the_source(self):
        assert config.delimiter_issues(";") == []
        assert config.delimiter_issues("::", name="--delimiter")[0].startswith("--delimiter")

    def test_cli_refuses_invalid_config(self, reload_config, tmp_path, capsys):
        from src.cli.main import main

        reload_config(CSV_DELIMITER="::")
        path = tmp_path / "m.csv"
        path.write_text("staff_pass_id,team_name,created_at\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Configuration error" in capsys.readouterr().out
