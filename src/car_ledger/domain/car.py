from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from car_ledger.domain.money import total

CAR_DOC_TYPE = "car"


@dataclass(frozen=True, slots=True)
class Malfunction:
    description: str
    price: Decimal


@dataclass(frozen=True, slots=True)
class Car:
    id: str
    brand: str
    model: str
    year: str
    color: str
    owner: str
    price: Decimal
    malfunctions: tuple[Malfunction, ...] = ()

    doc_type: ClassVar[str] = CAR_DOC_TYPE

    @property
    def malfunction_cost(self) -> Decimal:
        """Accumulated repair cost of every reported malfunction."""
        return total([malfunction.price for malfunction in self.malfunctions])
