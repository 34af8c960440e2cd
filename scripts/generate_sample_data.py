#!/usr/bin/env python3
"""Populate a ledger and export a snapshot file.

Loads the fixed demo data set (default) or Faker-generated customers and
activity, prints dashboard statistics and writes
``banking-system-data-YYYY-MM-DD.json`` to the output directory.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import LedgerConfig
from bank_ledger.generators import LedgerGenerator, load_demo_data
from bank_ledger.logging import setup_logging
from bank_ledger.sinks import ConsoleSink, JsonFileSink
from bank_ledger.store import LedgerStore

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Populate an in-memory ledger and export a JSON snapshot"
    )
    parser.add_argument(
        "--customers",
        type=int,
        default=0,
        help="Number of fake customers to generate; 0 loads the demo data set (default: 0)",
    )
    parser.add_argument(
        "--transactions-per-account",
        type=int,
        default=5,
        help="Random transactions per generated account (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducible generation",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.export.output_dir,
        help=f"Directory for the snapshot file (default: {config.export.output_dir})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.validation.strict,
        help="Enable strict customer and amount validation",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    config.validation.strict = args.strict
    store = LedgerStore(config=config.validation)

    if args.customers > 0:
        LedgerGenerator(store, seed=args.seed).populate(
            args.customers, args.transactions_per_account
        )
    else:
        load_demo_data(store)

    console = ConsoleSink(pretty=False, max_records=10)
    console.write_batch("customers", store.list_customers())
    console.write_batch("accounts", store.list_accounts())
    print("\nRecent activity:")
    console.write_activity(
        store.list_recent_transactions(config.display.recent_activity_limit)
    )
    print("\nSystem statistics:")
    console.write_aggregates(store.compute_aggregates())

    sink = JsonFileSink(
        args.output_dir,
        pretty=config.export.pretty,
        filename_prefix=config.export.filename_prefix,
    )
    path = sink.write_snapshot(store)
    logger.info("Snapshot written to %s", path)
    sink.close()


if __name__ == "__main__":
    main()
