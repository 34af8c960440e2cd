"""Output sinks for exporting ledger data."""

from bank_ledger.sinks.console import ConsoleSink
from bank_ledger.sinks.json_file import JsonFileSink, build_snapshot

__all__ = ["ConsoleSink", "JsonFileSink", "build_snapshot"]
