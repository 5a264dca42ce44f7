"""Fix car use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from car_ledger.domain.car import Car
from car_ledger.domain.errors import InsufficientFundsError
from car_ledger.domain.user import User
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FixCarRequest:
    car_id: str


@dataclass(frozen=True, slots=True)
class FixCarResponse:
    car: Car
    owner: User
    mechanic: User
    repair_cost: Decimal


class FixCar:
    """
    Repair every malfunction of a car and settle the bill with the mechanic.

    The mechanic is a regular user record whose key comes from configuration
    (see car_ledger.infra.config.mechanic_account_id).

    Repairs are all-or-nothing: the malfunction list is cleared entirely.
    Balances are conserved: owner + mechanic is the same before and after.
    """

    def __init__(self, world_state: WorldState, mechanic_id: str) -> None:
        self._world_state = world_state
        self._mechanic_id = mechanic_id

    def execute(self, request: FixCarRequest) -> FixCarResponse:
        """
        Raises:
            NotFoundError: If the car, its owner or the mechanic account does not exist
            InsufficientFundsError: If the owner cannot pay the repair cost
        """
        with LedgerSession(self._world_state) as session:
            car = session.get_car(request.car_id)
            owner = session.get_user(car.owner)
            mechanic = session.get_user(self._mechanic_id)

            repair_cost = car.malfunction_cost
            if owner.balance < repair_cost:
                raise InsufficientFundsError(
                    f"User {owner.id} doesn't have enough money for repair costs",
                    user_id=owner.id,
                    required=str(repair_cost),
                    balance=str(owner.balance),
                )

            car = replace(car, malfunctions=())

            # The mechanic repairing their own car pays nobody.
            if owner.id == mechanic.id:
                session.put_car(car)
            else:
                owner = replace(owner, balance=owner.balance - repair_cost)
                mechanic = replace(mechanic, balance=mechanic.balance + repair_cost)
                session.put_user(owner)
                session.put_user(mechanic)
                session.put_car(car)

        logger.info(
            "Car repaired",
            extra={
                "car_id": car.id,
                "owner_id": owner.id,
                "mechanic_id": mechanic.id,
                "repair_cost": str(repair_cost),
            },
        )

        return FixCarResponse(
            car=car,
            owner=owner,
            mechanic=mechanic,
            repair_cost=repair_cost,
        )
