"""Read user use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_ledger.domain.user import User
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession


@dataclass(frozen=True, slots=True)
class ReadUserRequest:
    user_id: str


@dataclass(frozen=True, slots=True)
class ReadUserResponse:
    user: User


class ReadUser:
    """Use case for reading a single user by its world state key."""

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: ReadUserRequest) -> ReadUserResponse:
        """
        Raises:
            NotFoundError: If the key is absent
            DecodeError: If the stored record is not a user
        """
        session = LedgerSession(self._world_state)
        return ReadUserResponse(user=session.get_user(request.user_id))
