from __future__ import annotations

from dataclasses import dataclass, replace

from car_ledger.domain.car import Car
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession


@dataclass(frozen=True, slots=True)
class ChangeColorRequest:
    car_id: str
    color: str


@dataclass(frozen=True, slots=True)
class ChangeColorResponse:
    car: Car


class ChangeColor:
    """Repaint a car. Only the color field changes."""

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: ChangeColorRequest) -> ChangeColorResponse:
        with LedgerSession(self._world_state) as session:
            car = replace(session.get_car(request.car_id), color=request.color)
            session.put_car(car)

        return ChangeColorResponse(car=car)
