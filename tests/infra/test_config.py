"""Tests for environment-based configuration."""

from __future__ import annotations

import pytest

from car_ledger.infra.config import database_url, log_level, mechanic_account_id, state_backend


def test_database_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://ledger@localhost/ledger")

    assert database_url() == "postgresql+psycopg://ledger@localhost/ledger"


def test_mechanic_defaults_to_user3(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAR_LEDGER_MECHANIC_ID", raising=False)

    assert mechanic_account_id() == "user3"


def test_mechanic_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAR_LEDGER_MECHANIC_ID", "garage")

    assert mechanic_account_id() == "garage"


def test_state_backend_defaults_to_sql(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CAR_LEDGER_STATE_BACKEND", raising=False)

    assert state_backend() == "sql"


def test_state_backend_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAR_LEDGER_STATE_BACKEND", "Memory")

    assert state_backend() == "memory"


def test_state_backend_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAR_LEDGER_STATE_BACKEND", "redis")

    with pytest.raises(RuntimeError, match="redis"):
        state_backend()


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert log_level() == "DEBUG"
