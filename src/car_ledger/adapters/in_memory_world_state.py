from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

from car_ledger.domain.errors import PersistenceError, ValidationError
from car_ledger.ports.world_state import QueryCursor, StateChange, StateRecord, WorldState


class InMemoryQueryCursor(QueryCursor):
    def __init__(self, records: list[StateRecord], on_close: Callable[[], None]) -> None:
        self._records = iter(records)
        self._on_close = on_close
        self._closed = False

    def __next__(self) -> StateRecord:
        if self._closed:
            raise StopIteration
        return next(self._records)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._on_close()


class InMemoryWorldState(WorldState):
    """
    Canonical contract implementation for tests and local runs.

    - Stores records in insertion order (query results follow it)
    - Evaluates selectors as AND-ed equality predicates on top-level fields
    - Accepts plain values or {"$eq": value} as predicates
    - commit() validates the whole batch before touching any record
    - Tracks open cursors so tests can assert they are released
    """

    def __init__(self, records: dict[str, bytes] | None = None) -> None:
        self._records: dict[str, bytes] = dict(records or {})
        self.open_cursors = 0

    def read(self, key: str) -> bytes | None:
        return self._records.get(key)

    def write(self, key: str, value: bytes) -> None:
        self._records[key] = value

    def delete(self, key: str) -> None:
        if key not in self._records:
            raise PersistenceError(f"Cannot delete missing key '{key}'", key=key)
        del self._records[key]

    def query(self, query_string: str) -> QueryCursor:
        selector = json.loads(query_string)["selector"]
        matches = [
            StateRecord(key=key, value=value)
            for key, value in self._records.items()
            if self._matches(value, selector)
        ]

        self.open_cursors += 1
        return InMemoryQueryCursor(matches, on_close=self._release_cursor)

    def commit(self, changes: Sequence[StateChange]) -> None:
        staged = dict(self._records)
        for change in changes:
            if change.value is None:
                if change.key not in staged:
                    raise PersistenceError(
                        f"Cannot delete missing key '{change.key}'", key=change.key
                    )
                del staged[change.key]
            else:
                staged[change.key] = change.value

        self._records = staged

    def snapshot(self) -> dict[str, bytes]:
        """Copy of every stored record, for before/after comparisons."""
        return dict(self._records)

    def _release_cursor(self) -> None:
        self.open_cursors -= 1

    def _matches(self, value: bytes, selector: dict[str, Any]) -> bool:
        try:
            document = json.loads(value)
        except ValueError:
            return False
        if not isinstance(document, dict):
            return False

        for field, predicate in selector.items():
            if isinstance(predicate, dict):
                if set(predicate) != {"$eq"}:
                    raise ValidationError(
                        f"Unsupported selector operator for field '{field}'", field=field
                    )
                predicate = predicate["$eq"]
            if field not in document or document[field] != predicate:
                return False
        return True
