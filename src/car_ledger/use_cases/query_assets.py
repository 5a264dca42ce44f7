from __future__ import annotations

import json
from dataclasses import dataclass

from car_ledger.domain.selectors import parse_query_string
from car_ledger.ports.world_state import WorldState
from car_ledger.use_cases.query_cars import QueryCarsResponse, collect_cars


@dataclass(frozen=True, slots=True)
class QueryAssetsRequest:
    query_string: str


class QueryAssets:
    """
    Run a caller-supplied selector as-is.

    No docType predicate is added. Results are still decoded as cars, so a
    selector that also matches user records fails with DecodeError.
    """

    def __init__(self, world_state: WorldState) -> None:
        self._world_state = world_state

    def execute(self, request: QueryAssetsRequest) -> QueryCarsResponse:
        """
        Raises:
            ValidationError: If the query string is not a selector document
            DecodeError: If a matching record is not a car
        """
        document = parse_query_string(request.query_string)
        return QueryCarsResponse(cars=collect_cars(self._world_state, json.dumps(document)))
