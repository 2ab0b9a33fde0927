import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_settings_default_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 8080


@pytest.mark.parametrize(("raw_port", "expected"), [("9090", 9090), (" 9090 ", 9090), ("", 8080), ("   ", 8080)])
def test_settings_reads_port(monkeypatch, raw_port, expected):
    monkeypatch.setenv("PORT", raw_port)

    settings = Settings(_env_file=None)

    assert settings.port == expected


@pytest.mark.parametrize("raw_port", ["http", "0", "70000"])
def test_settings_rejects_invalid_port(monkeypatch, raw_port):
    monkeypatch.setenv("PORT", raw_port)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize(("raw_level", "expected"), [("debug", "DEBUG"), (" warning ", "WARNING"), ("verbose", "INFO")])
def test_settings_normalizes_log_level(monkeypatch, raw_level, expected):
    monkeypatch.setenv("LOG_LEVEL", raw_level)

    settings = Settings(_env_file=None)

    assert settings.log_level == expected
