"""Tests for ReadCar, ReadUser and ChangeColor use cases."""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_ledger.adapters.in_memory_world_state import InMemoryWorldState
from car_ledger.domain.errors import DecodeError, NotFoundError
from car_ledger.domain.records import decode_car
from car_ledger.use_cases.change_color import ChangeColor, ChangeColorRequest
from car_ledger.use_cases.init_ledger import InitLedger
from car_ledger.use_cases.read_car import ReadCar, ReadCarRequest
from car_ledger.use_cases.read_user import ReadUser, ReadUserRequest


@pytest.fixture
def world_state() -> InMemoryWorldState:
    state = InMemoryWorldState()
    InitLedger(state).execute()
    return state


# ==============================================================================
# ReadCar / ReadUser
# ==============================================================================


def test_read_car_returns_decoded_car(world_state: InMemoryWorldState) -> None:
    car = ReadCar(world_state).execute(ReadCarRequest(car_id="car2")).car

    assert (car.brand, car.model, car.price) == ("Rolls Royce", "Phantom", Decimal("20000.00"))


def test_read_car_missing_raises_not_found(world_state: InMemoryWorldState) -> None:
    with pytest.raises(NotFoundError):
        ReadCar(world_state).execute(ReadCarRequest(car_id="car9"))


def test_read_car_on_user_key_raises_decode_error(world_state: InMemoryWorldState) -> None:
    with pytest.raises(DecodeError):
        ReadCar(world_state).execute(ReadCarRequest(car_id="user1"))


def test_read_user_returns_decoded_user(world_state: InMemoryWorldState) -> None:
    user = ReadUser(world_state).execute(ReadUserRequest(user_id="user3")).user

    assert (user.first_name, user.last_name, user.balance) == (
        "Nikola",
        "Nikolic",
        Decimal("4000.00"),
    )


def test_read_user_missing_raises_not_found(world_state: InMemoryWorldState) -> None:
    with pytest.raises(NotFoundError):
        ReadUser(world_state).execute(ReadUserRequest(user_id="user9"))


def test_read_user_on_car_key_raises_decode_error(world_state: InMemoryWorldState) -> None:
    with pytest.raises(DecodeError):
        ReadUser(world_state).execute(ReadUserRequest(user_id="car1"))


# ==============================================================================
# ChangeColor
# ==============================================================================


def test_change_color_only_changes_color(world_state: InMemoryWorldState) -> None:
    before = decode_car(world_state.read("car3") or b"")

    result = ChangeColor(world_state).execute(ChangeColorRequest(car_id="car3", color="Green"))

    after = decode_car(world_state.read("car3") or b"")
    assert after == result.car
    assert after.color == "Green"
    assert (after.brand, after.model, after.year, after.owner, after.price) == (
        before.brand,
        before.model,
        before.year,
        before.owner,
        before.price,
    )


def test_change_color_missing_car_raises_not_found(world_state: InMemoryWorldState) -> None:
    before = world_state.snapshot()

    with pytest.raises(NotFoundError):
        ChangeColor(world_state).execute(ChangeColorRequest(car_id="car9", color="Green"))

    assert world_state.snapshot() == before
