"""Report models computed from the ledger."""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_ledger.money import money_sum


@dataclass
class LedgerAggregates:
    """System-wide totals over the current collections."""

    total_balance: Decimal
    average_balance: Decimal
    total_deposits: Decimal
    total_withdrawals: Decimal
    total_transfers: Decimal
    counts: dict[str, int] = field(default_factory=dict)
    accounts_by_type: dict[str, int] = field(default_factory=dict)


@dataclass
class AccountSummary:
    """Per-account transaction totals."""

    account_id: int
    total_transactions: int = 0
    total_deposits: Decimal = Decimal("0.00")
    total_withdrawals: Decimal = Decimal("0.00")
    total_sent: Decimal = Decimal("0.00")
    total_received: Decimal = Decimal("0.00")

    @property
    def net_change(self) -> Decimal:
        """Deposits and incoming transfers minus withdrawals and outgoing transfers."""
        return money_sum([
            self.total_deposits,
            self.total_received,
            self.total_withdrawals.copy_negate(),
            self.total_sent.copy_negate(),
        ])
