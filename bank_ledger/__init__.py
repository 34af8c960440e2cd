"""In-memory banking ledger: customers, accounts and transactions."""

from bank_ledger.store import LedgerStore

__version__ = "0.1.0"

__all__ = ["LedgerStore", "__version__"]
