"""Per-invocation unit of work over the world state."""

from __future__ import annotations

from types import TracebackType

from car_ledger.domain.car import Car
from car_ledger.domain.errors import NotFoundError
from car_ledger.domain.records import decode_car, decode_user, encode_car, encode_user
from car_ledger.domain.user import User
from car_ledger.ports.world_state import StateChange, WorldState


class LedgerSession:
    """
    Stages the writes of one operation and commits them in a single call.

    - Reads see staged changes first (read-your-writes)
    - Nothing reaches the world state before commit()
    - As a context manager: commits on clean exit, discards on exception

    Handlers validate everything before staging, so a failed operation
    leaves the world state untouched.
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state
        self._staged: dict[str, StateChange] = {}

    def __enter__(self) -> LedgerSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.commit()
        else:
            self._staged.clear()

    # --------------------------------------------------------------------------
    # Reads
    # --------------------------------------------------------------------------

    def read(self, key: str) -> bytes | None:
        if key in self._staged:
            return self._staged[key].value
        return self._world_state.read(key)

    def exists(self, key: str) -> bool:
        return self.read(key) is not None

    def get_car(self, car_id: str) -> Car:
        """
        Raises:
            NotFoundError: If the key is absent
            DecodeError: If the stored record is not a car
        """
        raw = self.read(car_id)
        if raw is None:
            raise NotFoundError(resource="Car", identifier=car_id)
        return decode_car(raw, key=car_id)

    def get_user(self, user_id: str) -> User:
        """
        Raises:
            NotFoundError: If the key is absent
            DecodeError: If the stored record is not a user
        """
        raw = self.read(user_id)
        if raw is None:
            raise NotFoundError(resource="User", identifier=user_id)
        return decode_user(raw, key=user_id)

    # --------------------------------------------------------------------------
    # Staged writes
    # --------------------------------------------------------------------------

    def put_car(self, car: Car) -> None:
        self._stage(StateChange(key=car.id, value=encode_car(car)))

    def put_user(self, user: User) -> None:
        self._stage(StateChange(key=user.id, value=encode_user(user)))

    def delete(self, key: str) -> None:
        """
        Raises:
            NotFoundError: If the key is absent
        """
        if not self.exists(key):
            raise NotFoundError(resource="Asset", identifier=key)
        self._stage(StateChange(key=key, value=None))

    @property
    def pending(self) -> list[StateChange]:
        return list(self._staged.values())

    def commit(self) -> None:
        """Hand every staged change to the world state in one atomic call."""
        changes = self.pending
        if changes:
            self._world_state.commit(changes)
        self._staged.clear()

    def _stage(self, change: StateChange) -> None:
        self._staged[change.key] = change
