"""Settings module unit tests"""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from fieldschema.config import Settings, get_settings, resolve_strict
from fieldschema.errors import ConfigException


@pytest.fixture
def temp_config_file():
    """Create a temporary settings file"""
    fd, path = tempfile.mkstemp(suffix=".toml")
    os.close(fd)
    yield path
    # Cleanup
    os.unlink(path)


# ========== Test Cases ==========


def test_defaults():
    """Test: Settings defaults with no file and no environment"""
    settings = Settings()

    assert settings.strict is False
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_load_from_file(temp_config_file):
    """Test: Load settings from a TOML file"""
    content = """
strict = true
log_level = "debug"
log_file = "logs/engine.log"
"""
    Path(temp_config_file).write_text(content)

    settings = Settings.load_from_file(temp_config_file)

    assert settings.strict is True
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "logs/engine.log"


def test_env_overrides_file_config(temp_config_file, monkeypatch):
    """Test: Environment variables override file values"""
    content = """
strict = true
log_level = "WARNING"
"""
    Path(temp_config_file).write_text(content)

    monkeypatch.setenv("FIELDSCHEMA_STRICT", "false")

    settings = Settings.load_from_file(temp_config_file)

    assert settings.strict is False
    # Not overridden, keeps file value
    assert settings.log_level == "WARNING"


def test_config_file_not_found():
    """Test: Settings file not found"""
    with pytest.raises(ConfigException, match="Settings file not found"):
        Settings.load_from_file("/nonexistent/fieldschema.toml")


def test_invalid_log_level(temp_config_file):
    """Test: Invalid log level is reported as ConfigException"""
    Path(temp_config_file).write_text('log_level = "LOUD"\n')

    with pytest.raises(ConfigException, match="log_level"):
        Settings.load_from_file(temp_config_file)


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("FIELDSCHEMA_STRICT", "1")

    assert get_settings().strict is True


def test_get_settings_invalid_environment(monkeypatch):
    monkeypatch.setenv("FIELDSCHEMA_LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigException):
        get_settings()


def test_resolve_strict_prefers_explicit_value(monkeypatch):
    monkeypatch.setenv("FIELDSCHEMA_STRICT", "true")

    assert resolve_strict(False) is False
    assert resolve_strict(None) is True


def test_resolve_strict_falls_back_on_invalid_environment(monkeypatch, caplog):
    monkeypatch.setenv("FIELDSCHEMA_STRICT", "true")
    monkeypatch.setenv("FIELDSCHEMA_LOG_LEVEL", "LOUD")

    with caplog.at_level(logging.WARNING, logger="fieldschema"):
        assert resolve_strict(None) is False
    assert resolve_strict(True) is True
    assert "non-strict" in caplog.text
