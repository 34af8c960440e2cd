"""Input validation and sanitization for ledger operations."""

import re
from decimal import Decimal

from bank_ledger.config import ValidationConfig
from bank_ledger.exceptions import InvalidAmountError, ValidationError
from bank_ledger.models.enums import AccountType, TransactionType
from bank_ledger.money import to_money

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
PHONE_PATTERN = re.compile(r"^[+]?[0-9]{10,15}$")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s]{2,100}$")


def validate_amount(
    value: Decimal | int | float | str,
    config: ValidationConfig | None = None,
) -> Decimal:
    """Return the amount as money, rejecting zero, negatives and (strict) the ceiling."""
    amount = to_money(value)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than 0, got {amount}")
    if config is not None and config.strict and amount > config.max_amount:
        raise InvalidAmountError(
            f"Amount must not exceed {config.max_amount}, got {amount}"
        )
    return amount


def validate_initial_balance(
    value: Decimal | int | float | str,
    config: ValidationConfig | None = None,
) -> Decimal:
    """Opening balances may be zero but never negative."""
    amount = to_money(value)
    if amount < 0:
        raise InvalidAmountError(f"Initial balance cannot be negative, got {amount}")
    if config is not None and config.strict and amount > config.max_amount:
        raise InvalidAmountError(
            f"Initial balance must not exceed {config.max_amount}, got {amount}"
        )
    return amount


def parse_account_type(value: AccountType | str) -> AccountType:
    """Accept an ``AccountType`` or its string value."""
    try:
        return AccountType(value)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in AccountType)
        raise ValidationError(
            f"Invalid account type {value!r}. Must be one of {allowed}"
        ) from exc


def parse_transaction_type(value: TransactionType | str) -> TransactionType:
    """Accept a ``TransactionType`` or its string value."""
    try:
        return TransactionType(value)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in TransactionType)
        raise ValidationError(
            f"Invalid transaction type {value!r}. Must be one of {allowed}"
        ) from exc


def is_valid_name(name: str | None) -> bool:
    return bool(name and name.strip() and NAME_PATTERN.match(name.strip()))


def is_valid_age(age: int, config: ValidationConfig) -> bool:
    return config.min_age <= age <= config.max_age


def is_valid_email(email: str | None) -> bool:
    return bool(email and email.strip() and EMAIL_PATTERN.match(email.strip()))


def is_valid_contact(contact: str | None) -> bool:
    return bool(contact and PHONE_PATTERN.match(sanitize_contact(contact)))


def validate_customer(
    name: str,
    age: int,
    email: str,
    contact: str,
    config: ValidationConfig,
) -> None:
    """Check every customer rule and raise once with all failures.

    Raises
    ------
    ValidationError
        Carrying one message per failed rule.
    """
    errors = []
    if not is_valid_name(name):
        errors.append("Name must be 2-100 characters long and contain only letters and spaces")
    if not is_valid_age(age, config):
        errors.append(f"Age must be between {config.min_age} and {config.max_age} years")
    if not is_valid_email(email):
        errors.append("Please enter a valid email address")
    if not is_valid_contact(contact):
        errors.append("Please enter a valid contact number (10-15 digits)")
    if errors:
        raise ValidationError(errors)


def sanitize_string(value: str) -> str:
    return re.sub(r"[<>\"']", "", value.strip())


def sanitize_name(name: str) -> str:
    """Strip markup characters and capitalize each word."""
    words = sanitize_string(name).split()
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def sanitize_email(email: str) -> str:
    return sanitize_string(email).lower()


def sanitize_contact(contact: str) -> str:
    """Keep only digits and the leading ``+``."""
    return re.sub(r"[^0-9+]", "", sanitize_string(contact))
