"""World state encoding of domain entities.

Every entity is stored as a UTF-8 JSON document. Field names are part of the
external contract (other ledger clients read the same keys), so they are pinned
with aliases here and never derived from Python attribute names.

    User: {"ID", "docType": "user", "firstName", "lastName", "email", "balance"}
    Car:  {"ID", "docType": "car", "brand", "model", "year", "color", "owner",
           "price", "malfunctions": [{"description", "price"}]}

Money is written as a JSON number (whole amounts as integers) and held as a
cents Decimal in memory. Decimal strings are still accepted on read.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic import ValidationError as PydanticValidationError

from car_ledger.domain.car import CAR_DOC_TYPE, Car, Malfunction
from car_ledger.domain.errors import DecodeError
from car_ledger.domain.money import to_money
from car_ledger.domain.user import USER_DOC_TYPE, User

# Keys that hold text in every ledger document
TEXT_FIELDS = frozenset(
    {"ID", "docType", "brand", "model", "year", "color", "owner", "firstName", "lastName", "email"}
)


def _money_to_json(amount: Decimal) -> int | float:
    return int(amount) if amount == amount.to_integral_value() else float(amount)


Money = Annotated[
    Decimal,
    PlainSerializer(_money_to_json, return_type=int | float, when_used="json"),
]


class MalfunctionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    price: Money


class CarRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    doc_type: Literal["car"] = Field(alias="docType")
    brand: str
    model: str
    year: str
    color: str
    owner: str
    price: Money
    malfunctions: list[MalfunctionRecord] = Field(default_factory=list)

    @field_validator("malfunctions", mode="before")
    @classmethod
    def null_malfunctions_as_empty(cls, v: Any) -> Any:
        """Older records serialize an empty malfunction list as null."""
        return [] if v is None else v


class UserRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    doc_type: Literal["user"] = Field(alias="docType")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    balance: Money


# ==============================================================================
# Car
# ==============================================================================


def encode_car(car: Car) -> bytes:
    record = CarRecord(
        id=car.id,
        doc_type=CAR_DOC_TYPE,
        brand=car.brand,
        model=car.model,
        year=car.year,
        color=car.color,
        owner=car.owner,
        price=car.price,
        malfunctions=[
            MalfunctionRecord(description=m.description, price=m.price) for m in car.malfunctions
        ],
    )
    return record.model_dump_json(by_alias=True).encode("utf-8")


def decode_car(raw: bytes, key: str | None = None) -> Car:
    """
    Decode a stored document into a Car.

    Args:
        raw: Stored bytes
        key: World state key the bytes were read from (for error context)

    Raises:
        DecodeError: If the bytes are not a car document
    """
    try:
        record = CarRecord.model_validate_json(raw)
        return Car(
            id=record.id,
            brand=record.brand,
            model=record.model,
            year=record.year,
            color=record.color,
            owner=record.owner,
            price=to_money(record.price),
            malfunctions=tuple(
                Malfunction(description=m.description, price=to_money(m.price))
                for m in record.malfunctions
            ),
        )
    except (PydanticValidationError, ValueError) as exc:
        raise DecodeError(
            f"Record '{key}' is not a valid car" if key else "Record is not a valid car",
            key=key,
            doc_type=CAR_DOC_TYPE,
        ) from exc


# ==============================================================================
# User
# ==============================================================================


def encode_user(user: User) -> bytes:
    record = UserRecord(
        id=user.id,
        doc_type=USER_DOC_TYPE,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        balance=user.balance,
    )
    return record.model_dump_json(by_alias=True).encode("utf-8")


def decode_user(raw: bytes, key: str | None = None) -> User:
    """
    Decode a stored document into a User.

    Raises:
        DecodeError: If the bytes are not a user document
    """
    try:
        record = UserRecord.model_validate_json(raw)
        return User(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            balance=to_money(record.balance),
        )
    except (PydanticValidationError, ValueError) as exc:
        raise DecodeError(
            f"Record '{key}' is not a valid user" if key else "Record is not a valid user",
            key=key,
            doc_type=USER_DOC_TYPE,
        ) from exc
