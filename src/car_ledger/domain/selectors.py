"""Rich-query selector construction.

A query string is a JSON object with a ``selector`` key holding field-equality
predicates combined with AND semantics:

    {"selector": {"docType": "car", "color": "Red", "owner": "user1"}}

Query strings are always produced with ``json.dumps``, so caller-provided
values cannot break out of their string literal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from car_ledger.domain.car import CAR_DOC_TYPE
from car_ledger.domain.errors import ValidationError

SELECTOR_KEY = "selector"


@dataclass(frozen=True, slots=True)
class CarSelector:
    """Car filters; ``None`` means the field is not constrained."""

    color: str | None = None
    owner: str | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If a filter is present but empty
        """
        errors = []
        if self.color is not None and not self.color.strip():
            errors.append({"field": "color", "message": "Must not be blank", "code": "BLANK"})
        if self.owner is not None and not self.owner.strip():
            errors.append({"field": "owner", "message": "Must not be blank", "code": "BLANK"})
        if errors:
            raise ValidationError(errors=errors)

    def to_selector(self) -> dict[str, Any]:
        predicates: dict[str, Any] = {"docType": CAR_DOC_TYPE}
        if self.color is not None:
            predicates["color"] = self.color
        if self.owner is not None:
            predicates["owner"] = self.owner
        return {SELECTOR_KEY: predicates}

    def to_query_string(self) -> str:
        return json.dumps(self.to_selector(), separators=(",", ":"))


def parse_query_string(query: str) -> dict[str, Any]:
    """
    Validate a caller-supplied query string and return it as a document.

    The selector is passed through as-is; no discriminator predicate is added.

    Raises:
        ValidationError: If the string is not a JSON object with an object-valued selector
    """
    try:
        document = json.loads(query)
    except (json.JSONDecodeError, TypeError):
        raise ValidationError(
            errors=[
                {
                    "field": "query",
                    "message": "Must be a valid JSON document",
                    "code": "INVALID_JSON",
                }
            ]
        )

    if not isinstance(document, dict) or not isinstance(document.get(SELECTOR_KEY), dict):
        raise ValidationError(
            errors=[
                {
                    "field": "query",
                    "message": "Must be an object with a 'selector' object",
                    "code": "INVALID_SELECTOR",
                }
            ]
        )

    return document
