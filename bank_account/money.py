"""Amount normalisation helpers.

All monetary values inside the package are ``Decimal``. Callers may pass
``int``, ``float``, ``str`` or ``Decimal``; going through ``str`` keeps a
float such as ``0.1`` from dragging its binary expansion into the ledger.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

from bank_account.exceptions import InvalidArgumentError

Amount = Union[int, float, str, Decimal]

CENTS = Decimal("0.01")


def to_decimal(value: Amount) -> Decimal:
    """Normalise ``value`` to a finite ``Decimal`` without rounding it."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"Not a valid amount: {value!r}") from exc
    if not result.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {value!r}")
    return result


def format_money(value: Decimal) -> str:
    """Render an amount with two decimals and banker's rounding."""
    return f"{value.quantize(CENTS, rounding=ROUND_HALF_EVEN):.2f}"
