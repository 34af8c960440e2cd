"""JSON file sink for exporting ledger snapshots."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bank_ledger.exceptions import SinkError
from bank_ledger.sinks.serialization import encode, record_to_dict

if TYPE_CHECKING:
    from bank_ledger.store.ledger import LedgerStore

logger = logging.getLogger(__name__)


def build_snapshot(store: LedgerStore, exported_at: datetime) -> dict[str, Any]:
    """Capture the full ledger as JSON-ready data.

    Parameters
    ----------
    store : LedgerStore
        Store to capture.
    exported_at : datetime
        Export timestamp recorded in the document.

    Returns
    -------
    dict
        ``customers``, ``accounts`` and ``transactions`` (oldest first)
        plus ``export_date``.
    """
    return {
        "customers": [record_to_dict(c) for c in store.list_customers()],
        "accounts": [record_to_dict(a) for a in store.list_accounts()],
        "transactions": [record_to_dict(t) for t in store.list_transactions()],
        "export_date": exported_at.isoformat(),
    }


class JsonFileSink:
    """Output ledger data to JSON files."""

    def __init__(
        self,
        output_dir: str | Path,
        pretty: bool = True,
        filename_prefix: str = "banking-system-data",
    ) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output (two-space indent).
        filename_prefix : str
            Prefix of snapshot file names; the export date is appended.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self.filename_prefix = filename_prefix
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"
        self._dump(file_path, [record_to_dict(record) for record in records])
        self._counts[entity_type] = len(records)
        return file_path

    def write_snapshot(
        self,
        store: LedgerStore,
        exported_at: datetime | None = None,
    ) -> Path:
        """Write the whole ledger to ``<prefix>-YYYY-MM-DD.json``.

        Returns
        -------
        Path
            The file written.

        Raises
        ------
        SinkError
            If the file cannot be written.
        """
        exported_at = exported_at or datetime.now()
        snapshot = build_snapshot(store, exported_at)
        file_path = self.output_dir / f"{self.filename_prefix}-{exported_at.date().isoformat()}.json"
        self._dump(file_path, snapshot)

        for entity_type in ("customers", "accounts", "transactions"):
            self._counts[entity_type] = len(snapshot[entity_type])
        logger.info("Exported ledger snapshot to %s", file_path)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _dump(self, file_path: Path, data: Any) -> None:
        try:
            file_path.write_text(encode(data, self.pretty), encoding="utf-8")
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc
