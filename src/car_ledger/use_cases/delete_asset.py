from __future__ import annotations

import logging
from dataclasses import dataclass

from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.ledger_session import LedgerSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteAssetRequest:
    asset_id: str


class DeleteAsset:
    """
    Remove any record (car or user) from the world state.

    Existence is checked with a read before the delete is issued.
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: DeleteAssetRequest) -> None:
        """
        Raises:
            NotFoundError: If the key is absent
            PersistenceError: If the backend fails to delete
        """
        with LedgerSession(self._world_state) as session:
            session.delete(request.asset_id)

        logger.info("Asset deleted", extra={"asset_id": request.asset_id})
