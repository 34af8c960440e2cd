"""Synthetic ledger population through the store's own operations."""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Account, AccountType, Customer
from bank_ledger.store.ledger import LedgerStore

logger = logging.getLogger(__name__)


class LedgerGenerator(BaseGenerator):
    """Populate a ``LedgerStore`` with fake customers, accounts and activity.

    Everything goes through ``LedgerStore`` operations, so generated data
    satisfies the same balance and reference rules as user input, strict
    validation included.
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.55, 0.35, 0.10]

    # deposit, withdraw, transfer
    OPERATION_WEIGHTS = [0.5, 0.25, 0.25]

    def __init__(
        self,
        store: LedgerStore,
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        super().__init__(seed, locale)
        self.store = store

    def generate_customer(self) -> Customer:
        """Create one customer in the store."""
        name = re.sub(r"[^A-Za-z ]", "", f"{self.fake.first_name()} {self.fake.last_name()}")
        return self.store.create_customer(
            name=name,
            age=self.random.randint(18, 85),
            email=self.fake.unique.email(),
            contact=self.fake.numerify("+1##########"),
        )

    def generate_accounts(self, customer: Customer) -> list[Account]:
        """Open one to three accounts for a customer."""
        num_accounts = self.pick([1, 2, 3], [0.6, 0.3, 0.1])
        accounts = []
        for _ in range(num_accounts):
            account_type = self.pick(self.ACCOUNT_TYPES, self.ACCOUNT_TYPE_WEIGHTS)
            opening = self.money(0, 10000)
            accounts.append(
                self.store.create_account(customer.customer_id, account_type, opening)
            )
        return accounts

    def generate_activity(self, count: int) -> int:
        """Run ``count`` random deposits, withdrawals and transfers.

        Withdrawals and transfers are sized to the available balance, so
        none are rejected.

        Returns
        -------
        int
            Number of transactions recorded.
        """
        account_ids = list(self.store.accounts)
        if not account_ids:
            return 0

        recorded = 0
        for _ in range(count):
            operation = self.pick(["deposit", "withdraw", "transfer"], self.OPERATION_WEIGHTS)
            source = self.store.accounts[self.random.choice(account_ids)]

            if operation == "transfer" and len(account_ids) > 1 and source.balance >= Decimal("1.00"):
                target = self.random.choice([a for a in account_ids if a != source.account_id])
                amount = self.money(1, source.balance)
                self.store.transfer(source.account_id, target, amount)
            elif operation == "withdraw" and source.balance >= Decimal("1.00"):
                amount = self.money(1, source.balance)
                self.store.withdraw(source.account_id, amount)
            else:
                self.store.deposit(source.account_id, self.money(1, 5000))
            recorded += 1
        return recorded

    def populate(self, num_customers: int, transactions_per_account: int = 5) -> dict[str, int]:
        """Create customers, their accounts and random activity.

        Returns
        -------
        dict[str, int]
            The store's entity counts afterwards.
        """
        accounts_created = 0
        for _ in range(num_customers):
            customer = self.generate_customer()
            accounts_created += len(self.generate_accounts(customer))

        self.generate_activity(accounts_created * transactions_per_account)
        logger.info(
            "Generated %d customers, %d accounts, %d transactions",
            num_customers,
            accounts_created,
            len(self.store.transactions),
        )
        return self.store.summary()
