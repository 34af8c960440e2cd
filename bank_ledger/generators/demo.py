"""Fixed demonstration data set."""

from bank_ledger.models import AccountType
from bank_ledger.store.ledger import LedgerStore

DEMO_CUSTOMERS = [
    ("John Doe", 28, "john.doe@email.com", "+15550123000"),
    ("Jane Smith", 32, "jane.smith@email.com", "+15550124000"),
    ("Mike Johnson", 25, "mike.johnson@email.com", "+15550125000"),
]


def load_demo_data(store: LedgerStore) -> LedgerStore:
    """Load three customers, four accounts and six transactions.

    Accounts open empty and are funded through deposits, so every balance
    is backed by the log. Final balances: 5000.00, 2500.00, 8000.00 and
    15000.00.
    """
    john, jane, mike = (store.create_customer(*row) for row in DEMO_CUSTOMERS)

    john_savings = store.create_account(john.customer_id, AccountType.SAVINGS)
    john_current = store.create_account(john.customer_id, AccountType.CURRENT)
    jane_savings = store.create_account(jane.customer_id, AccountType.SAVINGS)
    mike_fixed = store.create_account(mike.customer_id, AccountType.FIXED_DEPOSIT)

    store.deposit(john_savings.account_id, "6500.00")
    store.deposit(john_current.account_id, "2500.00")
    store.deposit(jane_savings.account_id, "7000.00")
    store.deposit(mike_fixed.account_id, "15000.00")
    store.withdraw(john_savings.account_id, "500.00")
    store.transfer(john_savings.account_id, jane_savings.account_id, "1000.00")
    return store
