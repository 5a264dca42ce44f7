"""Buy car use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from car_ledger.domain.car import Car
from car_ledger.domain.errors import ConflictError, InsufficientFundsError, SaleCancelledError
from car_ledger.domain.user import User
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuyCarRequest:
    car_id: str
    buyer_id: str
    acknowledge_malfunctions: bool = False


@dataclass(frozen=True, slots=True)
class BuyCarResponse:
    car: Car
    seller: User
    buyer: User
    price_paid: Decimal


class BuyCar:
    """
    Transfer a car to a new owner against payment.

    Pricing:
    - No malfunctions: the buyer pays the car price
    - Malfunctions reported: the sale only proceeds if the buyer acknowledges
      them, and the price drops by the accumulated malfunction cost
      (no floor is applied)

    Seller, buyer and car are committed together; every check runs first.
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: BuyCarRequest) -> BuyCarResponse:
        """
        Raises:
            NotFoundError: If the car, its owner or the buyer does not exist
            ConflictError: If the buyer already owns the car
            SaleCancelledError: If malfunctions exist and were not acknowledged
            InsufficientFundsError: If the buyer cannot pay the effective price
        """
        with LedgerSession(self._world_state) as session:
            car = session.get_car(request.car_id)
            seller = session.get_user(car.owner)
            buyer = session.get_user(request.buyer_id)

            if buyer.id == seller.id:
                raise ConflictError(
                    f"User {buyer.id} already owns car {car.id}",
                    car_id=car.id,
                    buyer_id=buyer.id,
                )

            malfunction_cost = car.malfunction_cost
            price = car.price
            if malfunction_cost > 0:
                if not request.acknowledge_malfunctions:
                    raise SaleCancelledError(
                        "Car purchase has been cancelled due to car malfunctions",
                        car_id=car.id,
                        malfunction_cost=str(malfunction_cost),
                    )
                price = car.price - malfunction_cost

            if buyer.balance < price:
                raise InsufficientFundsError(
                    f"User {buyer.id} doesn't have enough money for purchase",
                    user_id=buyer.id,
                    required=str(price),
                    balance=str(buyer.balance),
                )

            seller = replace(seller, balance=seller.balance + price)
            buyer = replace(buyer, balance=buyer.balance - price)
            car = replace(car, owner=buyer.id)

            session.put_user(seller)
            session.put_user(buyer)
            session.put_car(car)

        logger.info(
            "Car sold",
            extra={
                "car_id": car.id,
                "seller_id": seller.id,
                "buyer_id": buyer.id,
                "price_paid": str(price),
            },
        )

        return BuyCarResponse(car=car, seller=seller, buyer=buyer, price_paid=price)
