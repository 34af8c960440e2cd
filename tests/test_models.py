"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime
from decimal import Decimal

import pytest

from bank_ledger.models import (
    Account,
    AccountSummary,
    AccountType,
    Customer,
    Deposit,
    Event,
    TransactionType,
    Transfer,
    Withdrawal,
)

NOW = datetime(2024, 1, 15, 10, 30, 0)


class TestCustomer:
    """Tests for Customer model."""

    def test_customer_creation(self) -> None:
        customer = Customer(
            customer_id=1,
            name="Jane Smith",
            age=32,
            email="jane.smith@email.com",
            contact="+1-555-0124",
        )

        assert customer.customer_id == 1
        assert customer.name == "Jane Smith"
        assert customer.updated_at is None


class TestAccount:
    """Tests for Account model."""

    def _account(self, balance: str) -> Account:
        return Account(
            account_id=1,
            customer_id=1,
            customer_name="John Doe",
            account_type=AccountType.SAVINGS,
            balance=Decimal(balance),
            created_at=date(2024, 1, 15),
        )

    def test_has_sufficient_balance(self) -> None:
        account = self._account("100.00")

        assert account.has_sufficient_balance(Decimal("100.00"))
        assert account.has_sufficient_balance(Decimal("99.99"))
        assert not account.has_sufficient_balance(Decimal("100.01"))

    def test_account_type_is_string_enum(self) -> None:
        assert self._account("0").account_type == "SAVINGS"


class TestTransactionVariants:
    """Tests for Deposit, Withdrawal and Transfer."""

    def test_deposit_has_no_source(self) -> None:
        txn = Deposit(transaction_id=1, amount=Decimal("50.00"), timestamp=NOW, to_account=3)

        assert txn.from_account is None
        assert txn.to_account == 3
        assert txn.transaction_type == TransactionType.DEPOSIT

    def test_deposit_rejects_source_argument(self) -> None:
        with pytest.raises(TypeError):
            Deposit(  # type: ignore[call-arg]
                transaction_id=1,
                amount=Decimal("50.00"),
                timestamp=NOW,
                to_account=3,
                from_account=2,
            )

    def test_withdrawal_has_no_destination(self) -> None:
        txn = Withdrawal(transaction_id=2, amount=Decimal("5.00"), timestamp=NOW, from_account=1)

        assert txn.to_account is None
        assert txn.from_account == 1
        assert txn.transaction_type == TransactionType.WITHDRAW

    def test_withdrawal_rejects_destination_argument(self) -> None:
        with pytest.raises(TypeError):
            Withdrawal(  # type: ignore[call-arg]
                transaction_id=2,
                amount=Decimal("5.00"),
                timestamp=NOW,
                from_account=1,
                to_account=4,
            )

    def test_transfer_has_both_references(self) -> None:
        txn = Transfer(
            transaction_id=3,
            amount=Decimal("10.00"),
            timestamp=NOW,
            from_account=1,
            to_account=2,
        )

        assert (txn.from_account, txn.to_account) == (1, 2)
        assert txn.transaction_type == TransactionType.TRANSFER

    def test_transactions_are_immutable(self) -> None:
        txn = Deposit(transaction_id=1, amount=Decimal("50.00"), timestamp=NOW, to_account=3)

        with pytest.raises(FrozenInstanceError):
            txn.amount = Decimal("1.00")  # type: ignore[misc]

    def test_involves(self) -> None:
        txn = Transfer(
            transaction_id=3,
            amount=Decimal("10.00"),
            timestamp=NOW,
            from_account=1,
            to_account=2,
        )

        assert txn.involves(1)
        assert txn.involves(2)
        assert not txn.involves(3)


class TestAccountSummary:
    """Tests for AccountSummary."""

    def test_defaults(self) -> None:
        summary = AccountSummary(account_id=1)

        assert summary.total_transactions == 0
        assert summary.net_change == Decimal("0")

    def test_net_change(self) -> None:
        summary = AccountSummary(
            account_id=1,
            total_transactions=4,
            total_deposits=Decimal("100.00"),
            total_withdrawals=Decimal("20.00"),
            total_sent=Decimal("30.00"),
            total_received=Decimal("5.00"),
        )

        assert summary.net_change == Decimal("55.00")


class TestEvent:
    """Tests for Event model."""

    def test_event_creation(self) -> None:
        event = Event(
            event_id=1,
            event_type="transaction.created",
            event_time=NOW,
            subject=10,
            data={"amount": "50.00"},
        )

        assert event.event_type == "transaction.created"
        assert event.metadata == {}
