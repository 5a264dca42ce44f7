from car_ledger.infra.db.models.base import Base
from car_ledger.infra.db.models.world_state import WorldStateRow

__all__ = ["Base", "WorldStateRow"]
