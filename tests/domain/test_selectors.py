"""Tests for rich-query selector construction."""

from __future__ import annotations

import json

import pytest

from car_ledger.domain.errors import ValidationError
from car_ledger.domain.selectors import CarSelector, parse_query_string


# ==============================================================================
# CarSelector
# ==============================================================================


def test_selector_without_filters_matches_all_cars() -> None:
    """An unconstrained selector still restricts results to cars."""
    assert CarSelector().to_selector() == {"selector": {"docType": "car"}}


def test_selector_with_color_and_owner() -> None:
    selector = CarSelector(color="Black", owner="user2")

    assert selector.to_selector() == {
        "selector": {"docType": "car", "color": "Black", "owner": "user2"}
    }


def test_query_string_escapes_quotes() -> None:
    """Quotes in a filter value stay inside the string literal."""
    selector = CarSelector(color='Red","docType":"user')

    document = json.loads(selector.to_query_string())

    assert document["selector"]["docType"] == "car"
    assert document["selector"]["color"] == 'Red","docType":"user'


@pytest.mark.parametrize(
    ("selector", "field"),
    [
        (CarSelector(color=""), "color"),
        (CarSelector(owner="   "), "owner"),
    ],
)
def test_validate_rejects_blank_filters(selector: CarSelector, field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        selector.validate()

    assert exc_info.value.errors == [
        {"field": field, "message": "Must not be blank", "code": "BLANK"}
    ]


def test_validate_accepts_absent_filters() -> None:
    CarSelector().validate()


# ==============================================================================
# parse_query_string
# ==============================================================================


def test_parse_query_string_returns_document_as_is() -> None:
    """No docType predicate is injected into caller-supplied selectors."""
    document = parse_query_string('{"selector":{"model":"Mustang"}}')

    assert document == {"selector": {"model": "Mustang"}}


def test_parse_query_string_rejects_invalid_json() -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_query_string("{selector:")

    assert exc_info.value.errors[0]["code"] == "INVALID_JSON"


@pytest.mark.parametrize(
    "query",
    ['["selector"]', '{"selector": "x"}', '{"filter": {"model": "S"}}'],
)
def test_parse_query_string_requires_selector_object(query: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_query_string(query)

    assert exc_info.value.errors[0]["code"] == "INVALID_SELECTOR"
