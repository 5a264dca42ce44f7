"""Tests for InitLedger use case."""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_ledger.adapters.in_memory_world_state import InMemoryWorldState
from car_ledger.domain.records import decode_car, decode_user
from car_ledger.use_cases.init_ledger import GENESIS_CARS, GENESIS_USERS, InitLedger


@pytest.fixture
def world_state() -> InMemoryWorldState:
    return InMemoryWorldState()


def test_seeds_three_users_and_six_cars(world_state: InMemoryWorldState) -> None:
    result = InitLedger(world_state).execute()

    assert [user.id for user in result.users] == ["user1", "user2", "user3"]
    assert [car.id for car in result.cars] == ["car1", "car2", "car3", "car4", "car5", "car6"]
    assert sorted(world_state.snapshot()) == sorted(
        ["user1", "user2", "user3", "car1", "car2", "car3", "car4", "car5", "car6"]
    )


def test_users_are_written_before_cars(world_state: InMemoryWorldState) -> None:
    InitLedger(world_state).execute()

    assert list(world_state.snapshot())[:3] == ["user1", "user2", "user3"]


def test_seeded_records_decode(world_state: InMemoryWorldState) -> None:
    InitLedger(world_state).execute()

    assert decode_user(world_state.read("user2") or b"").balance == Decimal("3500.00")
    car = decode_car(world_state.read("car4") or b"")
    assert (car.brand, car.model, car.owner, car.price) == (
        "Ford",
        "Mustang",
        "user2",
        Decimal("12000.00"),
    )
    assert car.malfunctions == ()


def test_every_genesis_car_has_a_genesis_owner() -> None:
    user_ids = {user.id for user in GENESIS_USERS}

    assert all(car.owner in user_ids for car in GENESIS_CARS)


def test_reseeding_overwrites_mutated_records(world_state: InMemoryWorldState) -> None:
    InitLedger(world_state).execute()
    world_state.write("car1", b'{"ID":"car1"}')

    InitLedger(world_state).execute()

    assert decode_car(world_state.read("car1") or b"").color == "Red"


def test_leaves_unrelated_keys_alone() -> None:
    world_state = InMemoryWorldState({"car99": b"{}"})

    InitLedger(world_state).execute()

    assert world_state.read("car99") == b"{}"


def test_logs_seeding(world_state: InMemoryWorldState, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="car_ledger.use_cases.init_ledger"):
        InitLedger(world_state).execute()

    record = next(r for r in caplog.records if r.getMessage() == "Ledger seeded")
    assert record.user_count == 3
    assert record.car_count == 6
