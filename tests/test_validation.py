"""Tests for input validation and sanitization."""

from decimal import Decimal

import pytest

from bank_ledger.config import ValidationConfig
from bank_ledger.exceptions import InvalidAmountError, ValidationError
from bank_ledger.models import AccountType
from bank_ledger.validation import (
    is_valid_age,
    is_valid_contact,
    is_valid_email,
    is_valid_name,
    parse_account_type,
    sanitize_contact,
    sanitize_email,
    sanitize_name,
    sanitize_string,
    to_money,
    validate_amount,
    validate_customer,
    validate_initial_balance,
)


class TestToMoney:
    """Tests for to_money coercion."""

    def test_string(self) -> None:
        assert to_money("12.5") == Decimal("12.50")

    def test_int(self) -> None:
        assert to_money(7) == Decimal("7.00")

    def test_float_uses_decimal_repr(self) -> None:
        assert to_money(0.1) == Decimal("0.10")

    def test_rounds_half_up(self) -> None:
        assert to_money("1.005") == Decimal("1.01")

    @pytest.mark.parametrize("value", ["abc", None, True, "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(InvalidAmountError):
            to_money(value)  # type: ignore[arg-type]


class TestAmounts:
    """Tests for amount validation."""

    def test_positive_amount(self) -> None:
        assert validate_amount("99.99") == Decimal("99.99")

    @pytest.mark.parametrize("value", ["0", "-1", "0.004"])
    def test_non_positive_rejected(self, value: str) -> None:
        with pytest.raises(InvalidAmountError, match="greater than 0"):
            validate_amount(value)

    def test_ceiling_only_in_strict_mode(self) -> None:
        huge = "1000000000.00"

        assert validate_amount(huge, ValidationConfig()) == Decimal(huge)
        with pytest.raises(InvalidAmountError, match="exceed"):
            validate_amount(huge, ValidationConfig(strict=True))

    def test_initial_balance_allows_zero(self) -> None:
        assert validate_initial_balance(0) == Decimal("0.00")

    def test_initial_balance_rejects_negative(self) -> None:
        with pytest.raises(InvalidAmountError, match="negative"):
            validate_initial_balance("-0.01")


class TestAccountType:
    """Tests for parse_account_type."""

    def test_enum_passthrough(self) -> None:
        assert parse_account_type(AccountType.SAVINGS) is AccountType.SAVINGS

    def test_string_value(self) -> None:
        assert parse_account_type("FIXED_DEPOSIT") is AccountType.FIXED_DEPOSIT

    def test_unknown(self) -> None:
        with pytest.raises(ValidationError, match="SAVINGS, CURRENT, FIXED_DEPOSIT"):
            parse_account_type("LOAN")


class TestFieldRules:
    """Tests for individual customer field rules."""

    @pytest.mark.parametrize("name,expected", [
        ("John Doe", True),
        ("  Jo  ", True),
        ("J", False),
        ("R2D2", False),
        ("", False),
        (None, False),
    ])
    def test_name(self, name: str | None, expected: bool) -> None:
        assert is_valid_name(name) is expected

    def test_age_bounds(self) -> None:
        config = ValidationConfig()

        assert is_valid_age(18, config)
        assert is_valid_age(120, config)
        assert not is_valid_age(17, config)
        assert not is_valid_age(121, config)

    @pytest.mark.parametrize("email,expected", [
        ("john.doe@email.com", True),
        ("a+b@sub.domain.org", True),
        ("john@localhost", False),
        ("not-an-email", False),
        ("", False),
    ])
    def test_email(self, email: str, expected: bool) -> None:
        assert is_valid_email(email) is expected

    @pytest.mark.parametrize("contact,expected", [
        ("+15550123456", True),
        ("(555) 012-3456", True),
        ("555-0123", False),
        ("", False),
    ])
    def test_contact(self, contact: str, expected: bool) -> None:
        assert is_valid_contact(contact) is expected


class TestValidateCustomer:
    """Tests for validate_customer."""

    def test_valid_customer(self) -> None:
        validate_customer("Jane Smith", 32, "jane@email.com", "+15550124000", ValidationConfig())

    def test_collects_all_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_customer("J", 10, "bad", "1", ValidationConfig())

        messages = exc_info.value.messages
        assert len(messages) == 4
        assert any("Age must be between 18 and 120" in m for m in messages)

    def test_custom_age_range(self) -> None:
        config = ValidationConfig(min_age=21, max_age=65)

        with pytest.raises(ValidationError, match="between 21 and 65"):
            validate_customer("Jane Smith", 20, "jane@email.com", "+15550124000", config)


class TestSanitize:
    """Tests for sanitization helpers."""

    def test_sanitize_string_strips_markup(self) -> None:
        assert sanitize_string(' <b>"hi"</b> ') == "bhi/b"

    def test_sanitize_name_capitalizes_words(self) -> None:
        assert sanitize_name("  mARY   ann  smith ") == "Mary Ann Smith"

    def test_sanitize_email_lowercases(self) -> None:
        assert sanitize_email(" Jane@Email.COM ") == "jane@email.com"

    def test_sanitize_contact_keeps_digits_and_plus(self) -> None:
        assert sanitize_contact("+1 (555) 012-3456") == "+15550123456"
