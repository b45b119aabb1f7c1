from __future__ import annotations

import pytest

from src.filerelay.config import AppConfig, load_config

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch) -> None:
    for name in ("PORT", "FILERELAY_PORT", "FILERELAY_HOST", "FILERELAY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.expiration_interval_seconds == 2.0


def test_plain_port_variable_is_honoured(monkeypatch) -> None:
    monkeypatch.delenv("FILERELAY_PORT", raising=False)
    monkeypatch.setenv("PORT", "8080")

    assert AppConfig().port == 8080


def test_prefixed_variables_override(monkeypatch) -> None:
    monkeypatch.setenv("FILERELAY_PORT", "9000")
    monkeypatch.setenv("FILERELAY_EXPIRATION_INTERVAL_SECONDS", "5")

    config = AppConfig()

    assert config.port == 9000
    assert config.expiration_interval_seconds == 5.0
