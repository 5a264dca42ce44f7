from __future__ import annotations

import os

DEFAULT_MECHANIC_ID = "user3"
STATE_BACKENDS = ("sql", "memory")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def mechanic_account_id() -> str:
    """World state key of the user that is paid for repairs."""
    return os.getenv("CAR_LEDGER_MECHANIC_ID") or DEFAULT_MECHANIC_ID


def state_backend() -> str:
    backend = os.getenv("CAR_LEDGER_STATE_BACKEND", "sql").lower()

    if backend not in STATE_BACKENDS:
        raise RuntimeError(
            f"CAR_LEDGER_STATE_BACKEND must be one of {STATE_BACKENDS}, got '{backend}'"
        )

    return backend


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
