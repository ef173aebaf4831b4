import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from asset_tracker.core.config import AppSettings
from asset_tracker.core.logging import JsonLogFormatter


def test_settings_defaults(monkeypatch):
    for name in ("EXPORT_PATH", "LOG_LEVEL", "LOG_FORMAT", "COLOR"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.EXPORT_PATH == Path("assets.csv")
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT == "json"
    assert settings.COLOR is True


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EXPORT_PATH", "/tmp/inventory.csv")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "plain")
    monkeypatch.setenv("COLOR", "0")

    settings = AppSettings(_env_file=None)

    assert settings.EXPORT_PATH == Path("/tmp/inventory.csv")
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "plain"
    assert settings.COLOR is False


def test_settings_reject_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "loud")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_json_log_formatter_merges_extra_data():
    record = logging.LogRecord(
        "asset_tracker.services.record_store", logging.INFO, __file__, 1, "Assets exported to %s", ("a.csv",), None
    )
    record.extra_data = {"records": 2}

    payload = json.loads(JsonLogFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "asset_tracker.services.record_store"
    assert payload["message"] == "Assets exported to a.csv"
    assert payload["records"] == 2
    assert payload["timestamp"].endswith("Z")
