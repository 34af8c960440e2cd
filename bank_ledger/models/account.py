"""Account model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bank_ledger.models.enums import AccountType


@dataclass
class Account:
    """Bank account entity.

    ``customer_name`` is a display copy of the owner's name taken when the
    account is opened.
    """

    account_id: int
    customer_id: int
    customer_name: str
    account_type: AccountType
    balance: Decimal
    created_at: date

    def has_sufficient_balance(self, amount: Decimal) -> bool:
        return self.balance >= amount
