"""Read car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_ledger.domain.car import Car
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession


@dataclass(frozen=True, slots=True)
class ReadCarRequest:
    car_id: str


@dataclass(frozen=True, slots=True)
class ReadCarResponse:
    car: Car


class ReadCar:
    """
    Use case for reading a single car by its world state key.

    Raises:
        NotFoundError: If the key is absent
        DecodeError: If the stored record is not a car
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: ReadCarRequest) -> ReadCarResponse:
        session = LedgerSession(self._world_state)
        return ReadCarResponse(car=session.get_car(request.car_id))
