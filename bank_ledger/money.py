"""Two-place Decimal money with exact balance arithmetic.

Amounts and balances carry at most ``MONEY_DIGITS`` significant digits.
Coercion rounds half up to cents; adding to or subtracting from a balance
never rounds, and raises ``InvalidAmountError`` instead of losing cents.
"""

from collections.abc import Iterable
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
    Overflow,
)

from bank_ledger.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
MONEY_DIGITS = 40

_COERCE = Context(prec=MONEY_DIGITS, rounding=ROUND_HALF_UP, traps=[InvalidOperation, Overflow])
_EXACT = Context(
    prec=MONEY_DIGITS, rounding=ROUND_HALF_UP, traps=[InvalidOperation, Overflow, Inexact]
)
# Report totals span many balances
_TOTALS = Context(prec=MONEY_DIGITS + 20, rounding=ROUND_HALF_UP, traps=[InvalidOperation, Overflow])


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Coerce a value to a two-place Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.10")`` rather
    than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number or needs more than
        ``MONEY_DIGITS`` digits at cent resolution.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        return amount.quantize(CENTS, context=_COERCE)
    except (InvalidOperation, Overflow) as exc:
        raise InvalidAmountError(
            f"Amount {value!r} exceeds {MONEY_DIGITS} significant digits"
        ) from exc


def add_money(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact ``balance + amount``."""
    try:
        return _EXACT.add(balance, amount)
    except (Inexact, InvalidOperation, Overflow) as exc:
        raise InvalidAmountError(
            f"Balance {balance} plus {amount} exceeds {MONEY_DIGITS} significant digits"
        ) from exc


def subtract_money(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact ``balance - amount``."""
    try:
        return _EXACT.subtract(balance, amount)
    except (Inexact, InvalidOperation, Overflow) as exc:
        raise InvalidAmountError(
            f"Balance {balance} minus {amount} exceeds {MONEY_DIGITS} significant digits"
        ) from exc


def money_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum for reports, in a context wide enough for any realistic ledger."""
    total = ZERO
    for value in values:
        total = _TOTALS.add(total, value)
    return total


def money_average(total: Decimal, count: int) -> Decimal:
    """``total / count`` rounded half up to cents; zero when ``count`` is 0."""
    if not count:
        return ZERO
    return _TOTALS.divide(total, Decimal(count)).quantize(CENTS, context=_TOTALS)
