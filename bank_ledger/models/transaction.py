"""Transaction models.

A transaction is one of three frozen variants. The account references a
variant cannot carry are fixed to ``None`` and excluded from ``__init__``,
so a ``Deposit`` can never name a source account and a ``Withdrawal`` can
never name a destination.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionType


@dataclass(frozen=True)
class _TransactionBase:
    transaction_id: int
    amount: Decimal
    timestamp: datetime

    def involves(self, account_id: int) -> bool:
        """Return True when the account is the source or destination."""
        return account_id in (self.from_account, self.to_account)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Deposit(_TransactionBase):
    """Money paid into an account."""

    to_account: int
    from_account: None = field(default=None, init=False)
    transaction_type: TransactionType = field(default=TransactionType.DEPOSIT, init=False)


@dataclass(frozen=True)
class Withdrawal(_TransactionBase):
    """Money taken out of an account."""

    from_account: int
    to_account: None = field(default=None, init=False)
    transaction_type: TransactionType = field(default=TransactionType.WITHDRAW, init=False)


@dataclass(frozen=True)
class Transfer(_TransactionBase):
    """Money moved between two accounts."""

    from_account: int
    to_account: int
    transaction_type: TransactionType = field(default=TransactionType.TRANSFER, init=False)


Transaction = Deposit | Withdrawal | Transfer
