"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only the in-memory world state is process-wide, since it is the store itself.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from car_ledger.adapters.in_memory_world_state import InMemoryWorldState
from car_ledger.adapters.sqlalchemy_world_state import SqlAlchemyWorldState
from car_ledger.infra.config import mechanic_account_id, state_backend
from car_ledger.infra.db.session import get_session
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.add_malfunction import AddMalfunction
from car_ledger.use_cases.asset_exists import AssetExists
from car_ledger.use_cases.buy_car import BuyCar
from car_ledger.use_cases.change_color import ChangeColor
from car_ledger.use_cases.delete_asset import DeleteAsset
from car_ledger.use_cases.fix_car import FixCar
from car_ledger.use_cases.init_ledger import InitLedger
from car_ledger.use_cases.query_assets import QueryAssets
from car_ledger.use_cases.query_cars import QueryCars
from car_ledger.use_cases.read_car import ReadCar
from car_ledger.use_cases.read_user import ReadUser


@lru_cache
def get_in_memory_world_state() -> InMemoryWorldState:
    return InMemoryWorldState()


def get_world_state() -> Generator[WorldState, None, None]:
    """
    Provides the world state for a single request.

    With the sql backend, each request gets its own session. get_session()
    commits on success and rolls back if the route raised, so the request
    is one transaction.

    Yields:
        WorldState: Backend selected by CAR_LEDGER_STATE_BACKEND
    """
    if state_backend() == "memory":
        yield get_in_memory_world_state()
        return

    with get_session() as session:
        yield SqlAlchemyWorldState(session=session)


def get_init_ledger_use_case(world_state: WorldState = Depends(get_world_state)) -> InitLedger:
    return InitLedger(world_state=world_state)


def get_read_car_use_case(world_state: WorldState = Depends(get_world_state)) -> ReadCar:
    return ReadCar(world_state=world_state)


def get_read_user_use_case(world_state: WorldState = Depends(get_world_state)) -> ReadUser:
    return ReadUser(world_state=world_state)


def get_query_cars_use_case(world_state: WorldState = Depends(get_world_state)) -> QueryCars:
    return QueryCars(world_state=world_state)


def get_query_assets_use_case(world_state: WorldState = Depends(get_world_state)) -> QueryAssets:
    return QueryAssets(world_state=world_state)


def get_change_color_use_case(world_state: WorldState = Depends(get_world_state)) -> ChangeColor:
    return ChangeColor(world_state=world_state)


def get_add_malfunction_use_case(
    world_state: WorldState = Depends(get_world_state),
) -> AddMalfunction:
    return AddMalfunction(world_state=world_state)


def get_buy_car_use_case(world_state: WorldState = Depends(get_world_state)) -> BuyCar:
    return BuyCar(world_state=world_state)


def get_fix_car_use_case(world_state: WorldState = Depends(get_world_state)) -> FixCar:
    """The mechanic account is read from configuration on every request."""
    return FixCar(world_state=world_state, mechanic_id=mechanic_account_id())


def get_delete_asset_use_case(world_state: WorldState = Depends(get_world_state)) -> DeleteAsset:
    return DeleteAsset(world_state=world_state)


def get_asset_exists_use_case(world_state: WorldState = Depends(get_world_state)) -> AssetExists:
    return AssetExists(world_state=world_state)
