"""
End-to-end ledger scenarios over the in-memory world state.

Each test seeds the ledger and drives several use cases in sequence.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_ledger.adapters.in_memory_world_state import InMemoryWorldState
from car_ledger.domain.errors import NotFoundError, SaleCancelledError
from car_ledger.use_cases.add_malfunction import AddMalfunction, AddMalfunctionRequest
from car_ledger.use_cases.buy_car import BuyCar, BuyCarRequest
from car_ledger.use_cases.fix_car import FixCar, FixCarRequest
from car_ledger.use_cases.init_ledger import InitLedger
from car_ledger.use_cases.read_car import ReadCar, ReadCarRequest
from car_ledger.use_cases.read_user import ReadUser, ReadUserRequest


@pytest.fixture
def world_state() -> InMemoryWorldState:
    state = InMemoryWorldState()
    InitLedger(state).execute()
    return state


def _balance(world_state: InMemoryWorldState, user_id: str) -> Decimal:
    return ReadUser(world_state).execute(ReadUserRequest(user_id=user_id)).user.balance


def test_malfunction_then_write_off(world_state: InMemoryWorldState) -> None:
    add = AddMalfunction(world_state)

    result = add.execute(
        AddMalfunctionRequest(car_id="car1", description="Flat tires", price=Decimal("850"))
    )
    assert len(result.car.malfunctions) == 1  # type: ignore[union-attr]
    assert result.car.malfunction_cost == Decimal("850.00")  # type: ignore[union-attr]

    written_off = add.execute(
        AddMalfunctionRequest(car_id="car6", description="Engine issues", price=Decimal("11000"))
    )
    assert written_off.written_off is True

    with pytest.raises(NotFoundError):
        ReadCar(world_state).execute(ReadCarRequest(car_id="car6"))


def test_cancelled_then_acknowledged_purchase(world_state: InMemoryWorldState) -> None:
    AddMalfunction(world_state).execute(
        AddMalfunctionRequest(car_id="car5", description="Cracked screen", price=Decimal("1500"))
    )
    buy = BuyCar(world_state)
    buyer_before = _balance(world_state, "user1")
    seller_before = _balance(world_state, "user2")

    with pytest.raises(SaleCancelledError):
        buy.execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    buy.execute(BuyCarRequest(car_id="car5", buyer_id="user1", acknowledge_malfunctions=True))

    effective_price = Decimal("9000.00") - Decimal("1500.00")
    assert _balance(world_state, "user1") == buyer_before - effective_price
    assert _balance(world_state, "user2") == seller_before + effective_price
    assert ReadCar(world_state).execute(ReadCarRequest(car_id="car5")).car.owner == "user1"


def test_repaired_car_sells_at_full_price(world_state: InMemoryWorldState) -> None:
    """Active → malfunctions → repaired → Active with an empty list."""
    AddMalfunction(world_state).execute(
        AddMalfunctionRequest(car_id="car5", description="Worn clutch", price=Decimal("700"))
    )
    FixCar(world_state, mechanic_id="user3").execute(FixCarRequest(car_id="car5"))

    result = BuyCar(world_state).execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    assert result.price_paid == Decimal("9000.00")
    assert _balance(world_state, "user2") == Decimal("11800.00")
    assert _balance(world_state, "user3") == Decimal("4700.00")
