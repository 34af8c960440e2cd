"""Console sink for demos: records, recent activity and dashboard totals."""

from collections import Counter
from typing import Any

from bank_ledger.formatting import describe_transaction, format_amount
from bank_ledger.models import LedgerAggregates, Transaction
from bank_ledger.sinks.serialization import encode, record_to_dict

RULE = "=" * 60


class ConsoleSink:
    """Print ledger data to stdout.

    Parameters
    ----------
    pretty : bool
        Indent JSON records.
    max_records : int | None
        Records shown per batch; ``None`` shows all.
    """

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        self.pretty = pretty
        self.max_records = max_records
        self._counts: Counter[str] = Counter()

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print a titled batch of records as JSON."""
        print(f"\n{RULE}\n{entity_type} ({len(records)} records)\n{RULE}")

        shown = records if self.max_records is None else records[: self.max_records]
        for record in shown:
            print(encode(record_to_dict(record), self.pretty))

        hidden = len(records) - len(shown)
        if hidden > 0:
            print(f"... and {hidden} more records")
        self._counts[entity_type] += len(records)

    def write_activity(self, transactions: list[Transaction]) -> None:
        """Print one ``[TYPE] description`` line per transaction."""
        if not transactions:
            print("No recent activity")
            return
        for txn in transactions:
            print(f"[{txn.transaction_type.value}] {describe_transaction(txn)}")

    def write_aggregates(self, aggregates: LedgerAggregates) -> None:
        rows = [
            ("Total Balance", aggregates.total_balance),
            ("Average Balance", aggregates.average_balance),
            ("Total Deposits", aggregates.total_deposits),
            ("Total Withdrawals", aggregates.total_withdrawals),
            ("Total Transfers", aggregates.total_transfers),
        ]
        for label, amount in rows:
            print(f"{label + ':':<19}{format_amount(amount)}")
        for name, count in aggregates.counts.items():
            print(f"  {name}: {count}")

    def close(self) -> None:
        """Print how many records went through each batch type."""
        print(f"\n{RULE}\nConsole sink summary\n{RULE}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
