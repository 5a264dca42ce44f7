from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from types import TracebackType


@dataclass(frozen=True)
class StateRecord:
    """A (key, value) pair yielded by a query cursor."""

    key: str
    value: bytes


@dataclass(frozen=True)
class StateChange:
    """A pending write; ``value=None`` deletes the key."""

    key: str
    value: bytes | None

    @property
    def is_delete(self) -> bool:
        return self.value is None


class QueryCursor(ABC):
    """
    Forward-only, finite, non-restartable iterator over query results.

    Cursors hold a backend query handle and must be released after use.
    Use them as context managers so release happens on every exit path:

        with world_state.query(selector) as cursor:
            for record in cursor:
                ...
    """

    def __iter__(self) -> Iterator[StateRecord]:
        return self

    @abstractmethod
    def __next__(self) -> StateRecord: ...

    @abstractmethod
    def close(self) -> None:
        """Release the query handle. Must be idempotent."""
        ...

    def __enter__(self) -> QueryCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class WorldState(ABC):
    """
    Port for the key-value world state.

    Contract:
        - Keys share one namespace; entity kinds are told apart by the
          ``docType`` field of the stored document
        - Backend failures surface as PersistenceError
        - commit() applies every change or none of them
        - Isolation between concurrent invocations is the backend's concern
    """

    @abstractmethod
    def read(self, key: str) -> bytes | None:
        """Return the stored bytes, or None if the key is absent."""
        ...

    @abstractmethod
    def write(self, key: str, value: bytes) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key.

        Raises:
            PersistenceError: If the key is absent
        """
        ...

    @abstractmethod
    def query(self, query_string: str) -> QueryCursor:
        """
        Run a rich query.

        Args:
            query_string: JSON document with a ``selector`` object (pre-validated)

        Returns:
            Cursor over matching records; the caller must close it
        """
        ...

    @abstractmethod
    def commit(self, changes: Sequence[StateChange]) -> None:
        """
        Apply a batch of writes and deletes atomically.

        Raises:
            PersistenceError: If any change cannot be applied; nothing is applied then
        """
        ...
