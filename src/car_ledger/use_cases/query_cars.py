from __future__ import annotations

from dataclasses import dataclass

from car_ledger.domain.car import Car
from car_ledger.domain.records import decode_car
from car_ledger.domain.selectors import CarSelector
from car_ledger.ports.world_state import WorldState


def collect_cars(world_state: WorldState, query_string: str) -> list[Car]:
    """
    Run a query and decode every result as a Car, in cursor order.

    The cursor is released on every exit path. A single record that does not
    decode aborts the whole collection.

    Raises:
        DecodeError: If any result is not a car document
    """
    cars: list[Car] = []
    with world_state.query(query_string) as cursor:
        for record in cursor:
            cars.append(decode_car(record.value, key=record.key))
    return cars


@dataclass(frozen=True, slots=True)
class QueryCarsRequest:
    selector: CarSelector


@dataclass(frozen=True, slots=True)
class QueryCarsResponse:
    cars: list[Car]


class QueryCars:
    """
    Find cars by color, owner, or both.

    Only car records are matched: the docType predicate is always part of
    the selector. Without filters every car is returned.
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: QueryCarsRequest) -> QueryCarsResponse:
        request.selector.validate()

        return QueryCarsResponse(
            cars=collect_cars(self._world_state, request.selector.to_query_string())
        )
