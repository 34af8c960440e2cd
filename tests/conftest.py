"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from bank_ledger.models import Account, Customer
from bank_ledger.store import LedgerStore

FIXED_NOW = datetime(2024, 3, 1, 16, 45, 0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> LedgerStore:
    """Fresh store with a frozen clock."""
    return LedgerStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def customer(store: LedgerStore) -> Customer:
    """Sample customer."""
    return store.create_customer("John Doe", 28, "john.doe@email.com", "+1-555-0123")


@pytest.fixture
def two_accounts(store: LedgerStore, customer: Customer) -> tuple[Account, Account]:
    """A savings account holding 100.00 and an empty current account."""
    savings = store.create_account(customer.customer_id, "SAVINGS", "100.00")
    current = store.create_account(customer.customer_id, "CURRENT", "0.00")
    return savings, current
