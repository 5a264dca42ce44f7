from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

USER_DOC_TYPE = "user"


@dataclass(frozen=True, slots=True)
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    balance: Decimal

    doc_type: ClassVar[str] = USER_DOC_TYPE
