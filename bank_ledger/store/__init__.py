"""In-memory ledger store."""

from bank_ledger.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
