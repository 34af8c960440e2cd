"""Domain models for the banking ledger."""

from bank_ledger.models.account import Account
from bank_ledger.models.base import Event
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import AccountType, TransactionType
from bank_ledger.models.reporting import AccountSummary, LedgerAggregates
from bank_ledger.models.transaction import Deposit, Transaction, Transfer, Withdrawal

__all__ = [
    "Account",
    "AccountSummary",
    "AccountType",
    "Customer",
    "Deposit",
    "Event",
    "LedgerAggregates",
    "Transaction",
    "TransactionType",
    "Transfer",
    "Withdrawal",
]
