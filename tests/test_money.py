"""Tests for money coercion and exact balance arithmetic."""

from decimal import Decimal

import pytest

from bank_ledger.exceptions import InvalidAmountError
from bank_ledger.money import (
    MONEY_DIGITS,
    add_money,
    money_average,
    money_sum,
    subtract_money,
    to_money,
)

# Largest whole amount that still fits with its two cent digits
WIDEST = Decimal("9" * (MONEY_DIGITS - 2))


class TestToMoney:
    """Tests for to_money beyond the default Decimal precision."""

    def test_amount_wider_than_default_context(self) -> None:
        assert to_money(10**26) == Decimal("100000000000000000000000000.00")

    def test_widest_amount_kept_exactly(self) -> None:
        assert to_money(WIDEST) == Decimal("9" * (MONEY_DIGITS - 2) + ".00")

    @pytest.mark.parametrize("value", [10**MONEY_DIGITS, "1e999999999", "1E+50"])
    def test_too_many_digits_rejected(self, value: object) -> None:
        with pytest.raises(InvalidAmountError, match="significant digits"):
            to_money(value)  # type: ignore[arg-type]


class TestBalanceArithmetic:
    """Tests for add_money and subtract_money."""

    def test_cents_survive_large_balances(self) -> None:
        balance = add_money(to_money("9e25"), to_money("9e25"))

        balance = add_money(balance, to_money("0.07"))

        assert balance == Decimal("180000000000000000000000000.07")
        assert str(balance) == "180000000000000000000000000.07"

    def test_add_beyond_precision_raises(self) -> None:
        amount = to_money(WIDEST)

        with pytest.raises(InvalidAmountError, match="significant digits"):
            add_money(amount, amount)

    def test_subtract_is_exact(self) -> None:
        balance = to_money("100000000000000000000000000.05")

        assert subtract_money(balance, to_money("0.04")) == Decimal(
            "100000000000000000000000000.01"
        )


class TestReportTotals:
    """Tests for money_sum and money_average."""

    def test_sum_wider_than_one_balance(self) -> None:
        amount = to_money(WIDEST)

        total = money_sum([amount, amount, to_money("0.01")])

        assert total == Decimal("1" + "9" * (MONEY_DIGITS - 3) + "8.01")

    def test_sum_of_nothing(self) -> None:
        assert money_sum([]) == Decimal("0.00")

    def test_average_rounds_half_up(self) -> None:
        assert money_average(Decimal("10.00"), 3) == Decimal("3.33")
        assert money_average(Decimal("0.05"), 2) == Decimal("0.03")

    def test_average_without_accounts(self) -> None:
        assert money_average(Decimal("0.00"), 0) == Decimal("0.00")

    def test_average_of_wide_total(self) -> None:
        total = money_sum([to_money(WIDEST), to_money(WIDEST)])

        assert money_average(total, 2) == to_money(WIDEST)
