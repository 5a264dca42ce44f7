"""SQLAlchemy implementation of WorldState."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import false, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from car_ledger.domain.errors import PersistenceError, ValidationError
from car_ledger.domain.records import TEXT_FIELDS
from car_ledger.infra.db.models.world_state import WorldStateRow
from car_ledger.ports.world_state import QueryCursor, StateChange, StateRecord, WorldState

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Result


def _dump(document: dict[str, Any]) -> bytes:
    return json.dumps(document, separators=(",", ":")).encode("utf-8")


def _load(key: str, value: bytes) -> dict[str, Any]:
    try:
        document = json.loads(value)
    except ValueError as exc:
        raise PersistenceError(f"Value for key '{key}' is not a JSON document", key=key) from exc

    if not isinstance(document, dict):
        raise PersistenceError(f"Value for key '{key}' is not a JSON object", key=key)

    return document


class SqlAlchemyQueryCursor(QueryCursor):
    """Streams rows from an open SQLAlchemy result; closing it releases the result."""

    def __init__(self, result: Result[tuple[WorldStateRow]]) -> None:
        self._result = result
        self._rows = iter(result.scalars())

    def __next__(self) -> StateRecord:
        try:
            row = next(self._rows)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to iterate query results") from exc
        return StateRecord(key=row.key, value=_dump(row.document))

    def close(self) -> None:
        self._result.close()


class SqlAlchemyWorldState(WorldState):
    """
    SQLAlchemy implementation of WorldState.

    - One world_state row per key, document kept in a JSON column
    - Selector predicates become JSON-path equality clauses (str, number, bool);
      a number or bool never matches a text field such as color or owner
    - Query results are ordered by key and streamed through the cursor
    - commit() runs inside a SAVEPOINT, so a failed batch leaves the
      request transaction as it was
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize world state with a database session.

        Args:
            session: SQLAlchemy session for the current request
        """
        self._session = session

    def read(self, key: str) -> bytes | None:
        try:
            row = self._session.get(WorldStateRow, key)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to read '{key}' from world state", key=key) from exc

        return _dump(row.document) if row is not None else None

    def write(self, key: str, value: bytes) -> None:
        self.commit([StateChange(key=key, value=value)])

    def delete(self, key: str) -> None:
        self.commit([StateChange(key=key, value=None)])

    def query(self, query_string: str) -> QueryCursor:
        selector = json.loads(query_string)["selector"]

        stmt = select(WorldStateRow).order_by(WorldStateRow.key)
        for field, predicate in selector.items():
            stmt = stmt.where(self._build_predicate(field, predicate))

        try:
            result = self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to run world state query") from exc

        return SqlAlchemyQueryCursor(result)

    def commit(self, changes: Sequence[StateChange]) -> None:
        keys = [change.key for change in changes]
        try:
            with self._session.begin_nested():
                for change in changes:
                    if change.value is None:
                        row = self._session.get(WorldStateRow, change.key)
                        if row is None:
                            raise PersistenceError(
                                f"Cannot delete missing key '{change.key}'", key=change.key
                            )
                        self._session.delete(row)
                    else:
                        self._session.merge(
                            WorldStateRow(key=change.key, document=_load(change.key, change.value))
                        )
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to commit changes to world state", keys=keys) from exc

    def _build_predicate(self, field: str, predicate: Any) -> ColumnElement[bool]:
        """
        Build a JSON-path equality clause for one selector field.

        Raises:
            ValidationError: If the predicate uses an operator or value type that is not supported
        """
        if isinstance(predicate, dict):
            if set(predicate) != {"$eq"}:
                raise ValidationError(
                    f"Unsupported selector operator for field '{field}'", field=field
                )
            predicate = predicate["$eq"]

        element = WorldStateRow.document[field]

        # a cast of text to boolean or float fails on PostgreSQL
        if field in TEXT_FIELDS and isinstance(predicate, (bool, int, float)):
            return false()

        # bool first: bool is a subclass of int
        if isinstance(predicate, bool):
            return element.as_boolean() == predicate
        if isinstance(predicate, (int, float)):
            return element.as_float() == predicate
        if isinstance(predicate, str):
            return element.as_string() == predicate

        raise ValidationError(f"Unsupported selector value for field '{field}'", field=field)
