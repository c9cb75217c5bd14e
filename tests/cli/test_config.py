import logging

import pytest
from rich.logging import RichHandler

from iam_policy import SizeMetric
from ips._config import Settings, load_settings
from ips._logging import setup_logging


def test_defaults():
    assert load_settings(env_file=None) == Settings(
        max_chars=6144, metric=SizeMetric.CHARS, log_level="WARNING",
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("IPS_MAX_CHARS", "2048")
    monkeypatch.setenv("IPS_SIZE_METRIC", "BYTES")
    monkeypatch.setenv("IPS_LOG_LEVEL", "debug")

    settings = load_settings(env_file=None)

    assert settings.max_chars == 2048
    assert settings.metric is SizeMetric.BYTES
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [
    ("IPS_MAX_CHARS", "dużo"),
    ("IPS_MAX_CHARS", "6144.5"),
    ("IPS_SIZE_METRIC", "tokens"),
    ("IPS_LOG_LEVEL", "LOUD"),
])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        load_settings(env_file=None)


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("IPS_MAX_CHARS=2048\nIPS_SIZE_METRIC=bytes\n", encoding="utf-8")

    settings = load_settings(env_file)

    assert settings.max_chars == 2048
    assert settings.metric is SizeMetric.BYTES


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("IPS_MAX_CHARS=2048\n", encoding="utf-8")
    monkeypatch.setenv("IPS_MAX_CHARS", "1000")

    assert load_settings(env_file).max_chars == 1000


def test_missing_env_file_is_ignored(tmp_path):
    assert load_settings(tmp_path / "brak.env").max_chars == 6144


def test_setup_logging_installs_rich_handler():
    setup_logging("info")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root.handlers)
