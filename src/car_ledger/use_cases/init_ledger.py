"""Seed the world state with the initial users and cars."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from car_ledger.domain.car import Car
from car_ledger.domain.user import User
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession

logger = logging.getLogger(__name__)


GENESIS_USERS: tuple[User, ...] = (
    User(
        id="user1",
        first_name="Marko",
        last_name="Markovic",
        email="marko@gugl.com",
        balance=Decimal("9000.00"),
    ),
    User(
        id="user2",
        first_name="Petar",
        last_name="Petrovic",
        email="petar@jahu.com",
        balance=Decimal("3500.00"),
    ),
    User(
        id="user3",
        first_name="Nikola",
        last_name="Nikolic",
        email="nikola@bing.com",
        balance=Decimal("4000.00"),
    ),
)

GENESIS_CARS: tuple[Car, ...] = (
    Car(
        id="car1",
        brand="Ferrari",
        model="F40",
        year="1990",
        color="Red",
        owner="user1",
        price=Decimal("5000.00"),
    ),
    Car(
        id="car2",
        brand="Rolls Royce",
        model="Phantom",
        year="2018",
        color="Black",
        owner="user1",
        price=Decimal("20000.00"),
    ),
    Car(
        id="car3",
        brand="Ford",
        model="GT40",
        year="1969",
        color="Blue",
        owner="user1",
        price=Decimal("7000.00"),
    ),
    Car(
        id="car4",
        brand="Ford",
        model="Mustang",
        year="2020",
        color="Black",
        owner="user2",
        price=Decimal("12000.00"),
    ),
    Car(
        id="car5",
        brand="Tesla",
        model="S",
        year="2019",
        color="White",
        owner="user2",
        price=Decimal("9000.00"),
    ),
    Car(
        id="car6",
        brand="Mazda",
        model="6",
        year="2018",
        color="Grey",
        owner="user2",
        price=Decimal("10000.00"),
    ),
)


@dataclass(frozen=True, slots=True)
class InitLedgerResponse:
    users: list[User]
    cars: list[Car]


class InitLedger:
    """
    Write the genesis users and cars.

    - Existing records with the same keys are overwritten (not idempotent
      with respect to mutations made since a previous seed)
    - Users are staged before cars; everything is committed in one call
    """

    def __init__(
        self,
        world_state: WorldState,
        users: tuple[User, ...] = GENESIS_USERS,
        cars: tuple[Car, ...] = GENESIS_CARS,
    ) -> None:
        self._world_state = world_state
        self._users = users
        self._cars = cars

    def execute(self) -> InitLedgerResponse:
        with LedgerSession(self._world_state) as session:
            for user in self._users:
                session.put_user(user)
            for car in self._cars:
                session.put_car(car)

        logger.info(
            "Ledger seeded",
            extra={"user_count": len(self._users), "car_count": len(self._cars)},
        )

        return InitLedgerResponse(users=list(self._users), cars=list(self._cars))
