"""Tests for BuyCar use case."""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_ledger.adapters.in_memory_world_state import InMemoryWorldState
from car_ledger.domain.errors import (
    ConflictError,
    InsufficientFundsError,
    NotFoundError,
    SaleCancelledError,
)
from car_ledger.domain.records import decode_car, decode_user
from car_ledger.use_cases.add_malfunction import AddMalfunction, AddMalfunctionRequest
from car_ledger.use_cases.buy_car import BuyCar, BuyCarRequest
from car_ledger.use_cases.init_ledger import InitLedger


@pytest.fixture
def world_state() -> InMemoryWorldState:
    state = InMemoryWorldState()
    InitLedger(state).execute()
    return state


def _balance(world_state: InMemoryWorldState, user_id: str) -> Decimal:
    return decode_user(world_state.read(user_id) or b"").balance


def _report(world_state: InMemoryWorldState, car_id: str, price: str) -> None:
    AddMalfunction(world_state).execute(
        AddMalfunctionRequest(car_id=car_id, description="Flat tires", price=Decimal(price))
    )


# ==============================================================================
# Happy path
# ==============================================================================


def test_buy_healthy_car_pays_full_price(world_state: InMemoryWorldState) -> None:
    result = BuyCar(world_state).execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    assert result.price_paid == Decimal("9000.00")
    assert result.car.owner == "user1"
    assert _balance(world_state, "user1") == Decimal("0.00")
    assert _balance(world_state, "user2") == Decimal("12500.00")
    assert decode_car(world_state.read("car5") or b"").owner == "user1"


def test_buy_acknowledged_malfunctions_reduces_price(world_state: InMemoryWorldState) -> None:
    _report(world_state, "car1", "1000.00")

    result = BuyCar(world_state).execute(
        BuyCarRequest(car_id="car1", buyer_id="user3", acknowledge_malfunctions=True)
    )

    assert result.price_paid == Decimal("4000.00")
    assert _balance(world_state, "user3") == Decimal("0.00")
    assert _balance(world_state, "user1") == Decimal("13000.00")


def test_malfunctions_travel_with_the_car(world_state: InMemoryWorldState) -> None:
    _report(world_state, "car5", "1000.00")

    BuyCar(world_state).execute(
        BuyCarRequest(car_id="car5", buyer_id="user1", acknowledge_malfunctions=True)
    )

    assert decode_car(world_state.read("car5") or b"").malfunction_cost == Decimal("1000.00")


def test_acknowledgement_is_ignored_for_healthy_cars(world_state: InMemoryWorldState) -> None:
    result = BuyCar(world_state).execute(
        BuyCarRequest(car_id="car5", buyer_id="user1", acknowledge_malfunctions=True)
    )

    assert result.price_paid == Decimal("9000.00")


def test_sale_is_logged(world_state: InMemoryWorldState, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="car_ledger.use_cases.buy_car"):
        BuyCar(world_state).execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    record = next(r for r in caplog.records if r.getMessage() == "Car sold")
    assert (record.seller_id, record.buyer_id, record.price_paid) == ("user2", "user1", "9000.00")


# ==============================================================================
# Refusals leave the ledger untouched
# ==============================================================================


def test_unacknowledged_malfunctions_cancel_the_sale(world_state: InMemoryWorldState) -> None:
    _report(world_state, "car5", "500.00")
    before = world_state.snapshot()

    with pytest.raises(SaleCancelledError) as exc_info:
        BuyCar(world_state).execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    assert exc_info.value.message == "Car purchase has been cancelled due to car malfunctions"
    assert world_state.snapshot() == before


def test_insufficient_funds(world_state: InMemoryWorldState) -> None:
    before = world_state.snapshot()

    with pytest.raises(InsufficientFundsError) as exc_info:
        BuyCar(world_state).execute(BuyCarRequest(car_id="car2", buyer_id="user2"))

    assert exc_info.value.context == {
        "user_id": "user2",
        "required": "20000.00",
        "balance": "3500.00",
    }
    assert world_state.snapshot() == before


def test_buyer_already_owns_car(world_state: InMemoryWorldState) -> None:
    before = world_state.snapshot()

    with pytest.raises(ConflictError):
        BuyCar(world_state).execute(BuyCarRequest(car_id="car1", buyer_id="user1"))

    assert world_state.snapshot() == before


@pytest.mark.parametrize(
    ("car_id", "buyer_id", "resource"),
    [("car9", "user1", "Car"), ("car1", "user9", "User")],
)
def test_missing_entities_raise_not_found(
    world_state: InMemoryWorldState, car_id: str, buyer_id: str, resource: str
) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        BuyCar(world_state).execute(BuyCarRequest(car_id=car_id, buyer_id=buyer_id))

    assert exc_info.value.context["resource"] == resource


def test_missing_seller_raises_not_found(world_state: InMemoryWorldState) -> None:
    world_state.delete("user2")

    with pytest.raises(NotFoundError) as exc_info:
        BuyCar(world_state).execute(BuyCarRequest(car_id="car5", buyer_id="user1"))

    assert exc_info.value.context["identifier"] == "user2"
