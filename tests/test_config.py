import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pico_logger.config import INITIAL_CAPACITY, LOG_PATH, Settings, load_settings
from pico_logger.gate import LevelGate
from pico_logger.models import Level


def test_default_settings():
    settings = Settings()
    assert settings.enabled is True
    assert settings.min_level == Level.INFO
    assert settings.initial_capacity == INITIAL_CAPACITY == 16
    assert settings.log_path == LOG_PATH
    assert os.path.basename(LOG_PATH) == "pico_logger.log"


@pytest.mark.parametrize("value, level", [
    ("warning", Level.WARNING),
    (" Error ", Level.ERROR),
    ("3", Level.CRITICAL),
    (0, Level.INFO),
    (Level.ERROR, Level.ERROR),
])
def test_level_parsing(value, level):
    assert Settings(min_level=value).min_level == level


@pytest.mark.parametrize("values", [
    {'min_level': "verbose"},
    {'min_level': 9},
    {'initial_capacity': 0},
    {'dump_width': 0},
])
def test_invalid_settings(values):
    with pytest.raises(ValidationError):
        Settings(**values)


def test_load_settings_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "PICO_LOG_ENABLED=false\n"
        "PICO_LOG_LEVEL=critical\n"
        f"PICO_LOG_PATH={tmp_path / 'app.log'}\n"
        "PICO_LOG_INITIAL_CAPACITY=64\n",
        encoding='utf-8'
    )
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings(str(env_file))
    assert settings.enabled is False
    assert settings.min_level == Level.CRITICAL
    assert settings.log_path == str(tmp_path / 'app.log')
    assert settings.initial_capacity == 64


def test_load_settings_without_file(tmp_path):
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings(str(tmp_path / "missing.env"))
    assert settings == Settings()


def test_gate_order():
    gate = LevelGate(min_level=Level.WARNING)
    assert not gate.allows(Level.INFO)
    assert gate.allows(Level.WARNING)
    assert gate.allows(Level.CRITICAL)
    gate.set_enabled(False)
    assert not gate.allows(Level.CRITICAL)


def test_empty_enabled_variable_is_unset():
    with patch.dict(os.environ, {'PICO_LOG_ENABLED': '', 'PICO_LOG_LEVEL': 'error'}, clear=True):
        settings = load_settings()
    assert settings.enabled is True
    assert settings.min_level == Level.ERROR


@pytest.mark.parametrize("value, level", [
    ("ERROR", Level.ERROR),
    ("warning", Level.WARNING),
    ("2", Level.ERROR),
    (3, Level.CRITICAL),
    (Level.INFO, Level.INFO),
    (7, 7),
])
def test_gate_accepts_names_and_numbers(value, level):
    gate = LevelGate()
    gate.set_min_level(value)
    assert gate.min_level == level
    assert gate.allows(Level.CRITICAL) == (level <= Level.CRITICAL)


@pytest.mark.parametrize("value, error", [
    ("verbose", ValueError),
    (None, TypeError),
    (1.5, TypeError),
    (True, TypeError),
])
def test_gate_rejects_bad_levels(value, error):
    gate = LevelGate(min_level=Level.WARNING)
    with pytest.raises(error):
        gate.set_min_level(value)
    assert gate.min_level == Level.WARNING
