"""Data generators for populating a ledger."""

from bank_ledger.generators.demo import load_demo_data
from bank_ledger.generators.ledger import LedgerGenerator

__all__ = ["LedgerGenerator", "load_demo_data"]
