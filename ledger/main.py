"""
Command-line entry point.

Replays a CSV file of transactions and prints the resulting account
balances as CSV on stdout. Diagnostics (skipped rows, rejected
transactions, the run summary) go to stderr so the output can be
redirected cleanly.

Usage:
    ledger-replay transactions.csv > accounts.csv

    # Stable output order and verbose diagnostics:
    ledger-replay transactions.csv --sort --log-level DEBUG

    # Same thing without installing the console script:
    python -m ledger transactions.csv

Exit codes:
    0  the whole file was processed (individual bad rows don't count)
    1  the file could not be read, or its header is unusable
    2  bad command-line arguments
"""

import argparse
import sys

from ledger.config import settings
from ledger.exceptions import TransactionSourceError
from ledger.logging_setup import configure_logging
from ledger.services.replay_service import replay_file
from ledger.services.statement_service import write_balances_csv
from ledger.services.transaction_service import TransactionProcessor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-replay",
        description="Replay a transactions CSV and print final account balances.",
        epilog="Balances are written to stdout; diagnostics to stderr.",
    )
    parser.add_argument(
        "transactions",
        help="Path to the transactions CSV (header: type, client, tx, amount)",
    )
    parser.add_argument(
        "--sort", action=argparse.BooleanOptionalAction,
        default=settings.SORT_OUTPUT,
        help="Order output rows by client id (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        help=f"Diagnostic log level (default: {settings.LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-format", choices=["text", "json"], default=settings.LOG_FORMAT,
        help=f"Diagnostic log format (default: {settings.LOG_FORMAT})",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"{settings.APP_NAME} {settings.APP_VERSION}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, fmt=args.log_format)
    except ValueError as exc:
        parser.error(str(exc))

    processor = TransactionProcessor()
    try:
        replay_file(args.transactions, processor)
    except TransactionSourceError as exc:
        print(f"error: {exc.detail}", file=sys.stderr)
        return 1

    write_balances_csv(processor.balances(sort=args.sort), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
