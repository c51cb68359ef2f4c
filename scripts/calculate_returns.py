#!/usr/bin/env python3
"""
Money-Weighted Return Calculator

Loads a transaction ledger, values current holdings and prints the
annualised money-weighted return (XIRR) for each reporting period.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mwr.analysis.holdings import build_snapshot  # noqa: E402
from mwr.analysis.performance import MwrCalculator  # noqa: E402
from mwr.core.config import Config, setup_logging  # noqa: E402
from mwr.core.exceptions import EmptyLedgerError, LedgerFormatError  # noqa: E402
from mwr.loaders import CsvLoader, MerrillLoader  # noqa: E402
from mwr.utils.reports import (  # noqa: E402
    export_results_csv,
    format_results_table,
    format_snapshot,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate money-weighted returns (XIRR)")
    parser.add_argument(
        "ledger",
        nargs="?",
        type=Path,
        help="Ledger CSV file (default: data.ledger_path from the config file)",
    )
    parser.add_argument(
        "--format",
        choices=["canonical", "merrill"],
        default="canonical",
        help="Ledger file format (default: canonical)",
    )
    parser.add_argument(
        "--as-of",
        type=lambda s: datetime.strptime(s, "%Y-%m-%d").date(),
        default=None,
        help="Evaluation date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--ending-value",
        type=float,
        default=None,
        help="Current portfolio value (default: valued from the ledger)",
    )
    parser.add_argument("--export", type=Path, default=None, help="Write results to this CSV file")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"), help="Config file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = Config.from_yaml(args.config) if args.config.exists() else Config()
    setup_logging(config.logging)

    ledger_path = args.ledger or config.data.ledger
    if not ledger_path.exists():
        logger.error(f"File not found: {ledger_path}")
        return 1

    if args.format == "merrill":
        loader = MerrillLoader(ledger_path)
    else:
        loader = CsvLoader(ledger_path, date_format=config.data.date_format)

    try:
        transactions = loader.load()
        snapshot = build_snapshot(transactions, as_of=args.as_of)
        ending_value = args.ending_value if args.ending_value is not None else snapshot.total_value

        calculator = MwrCalculator(config.calculator)
        results = calculator.calculate_returns(transactions, ending_value, args.as_of)
    except (EmptyLedgerError, LedgerFormatError) as e:
        logger.error(f"Error: {e}")
        return 1

    print(format_snapshot(snapshot))
    print()
    print(format_results_table(results))

    if args.export:
        export_results_csv(results, args.export)
        print(f"\nResults exported to: {args.export}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
