from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | str) -> Decimal:
    """
    Normalize an amount to cents (ROUND_HALF_UP).

    Raises:
        ValueError: If the value is a float, not a number, or not finite
    """
    if isinstance(value, float):
        raise ValueError("money must be Decimal, int or str (no floats past the boundary)")

    try:
        amount = Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"invalid money amount: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"invalid money amount: {value!r}")

    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def total(amounts: list[Decimal] | tuple[Decimal, ...]) -> Decimal:
    return sum(amounts, ZERO)
