"""Add malfunction use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from car_ledger.domain.car import Car, Malfunction
from car_ledger.domain.errors import ValidationError
from car_ledger.domain.money import to_money
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.delete_asset import DeleteAsset, DeleteAssetRequest
from car_ledger.use_cases.ledger_session import LedgerSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddMalfunctionRequest:
    car_id: str
    description: str
    price: Decimal

    def validate(self) -> None:
        """
        Validate the reported repair cost.

        Raises:
            ValidationError: If price is not a finite Decimal or is not strictly
                positive once rounded to cents
        """
        if not isinstance(self.price, Decimal) or not self.price.is_finite():
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": "Must be Decimal (no floats past the boundary)",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )
        if to_money(self.price) <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": "Price can't be zero or lower",
                        "code": "NON_POSITIVE_PRICE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class AddMalfunctionResponse:
    car: Car | None  # None when the car was written off
    written_off: bool


class AddMalfunction:
    """
    Record a malfunction against a car, or write the car off.

    Rules:
    - The car must exist (checked before the price)
    - price must be > 0 after rounding to cents
    - If price + existing malfunction cost > car price, the car is deleted
      through DeleteAsset and the new malfunction is NOT recorded
    - Otherwise the malfunction is appended, preserving report order
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state
        self._delete_asset = DeleteAsset(world_state)

    def execute(self, request: AddMalfunctionRequest) -> AddMalfunctionResponse:
        """
        Raises:
            NotFoundError: If the car does not exist
            ValidationError: If price <= 0
            DecodeError: If the stored record is not a car
        """
        with LedgerSession(self._world_state) as session:
            car = session.get_car(request.car_id)
            request.validate()

            price = to_money(request.price)
            total_cost = price + car.malfunction_cost
            if total_cost <= car.price:
                car = replace(
                    car,
                    malfunctions=car.malfunctions
                    + (Malfunction(description=request.description, price=price),),
                )
                session.put_car(car)
                return AddMalfunctionResponse(car=car, written_off=False)

        logger.info(
            "Car written off",
            extra={
                "car_id": car.id,
                "car_price": str(car.price),
                "malfunction_cost": str(total_cost),
            },
        )
        self._delete_asset.execute(DeleteAssetRequest(asset_id=car.id))

        return AddMalfunctionResponse(car=None, written_off=True)
