from __future__ import annotations

from dataclasses import dataclass

from car_ledger.ports.world_state import WorldState


@dataclass(frozen=True, slots=True)
class AssetExistsRequest:
    asset_id: str


@dataclass(frozen=True, slots=True)
class AssetExistsResponse:
    exists: bool


class AssetExists:
    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: AssetExistsRequest) -> AssetExistsResponse:
        return AssetExistsResponse(exists=self._world_state.read(request.asset_id) is not None)
