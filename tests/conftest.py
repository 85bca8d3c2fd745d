"""
Test fixtures for the ledger test suite.

This module provides shared fixtures used across all test files:

  - store / processor: a fresh LedgerStore and TransactionProcessor per test
  - apply_all: applies a list of (type, client, tx, amount) rows in order
  - balance_of: (available, held, total, locked) for one client, in units
  - write_csv: writes a transactions file under tmp_path and returns its path

Key design decisions:
  - Every test gets its own store, so no ledger state leaks between tests.
  - Amounts in rows are decimal text ("1.5"), exactly as they appear in an
    input file, and go through the same Transaction validation.
  - Logging configured by a CLI test is torn down after each test so later
    tests see the library default (NullHandler, propagating to caplog).
"""

import logging

import pytest

from ledger.schemas.transaction import Transaction
from ledger.services.ledger_store import LedgerStore
from ledger.services.transaction_service import TransactionProcessor


@pytest.fixture
def store():
    """An empty ledger store."""
    return LedgerStore()


@pytest.fixture
def processor(store):
    """A processor bound to the test's store."""
    return TransactionProcessor(store)


@pytest.fixture
def apply_all(processor):
    """
    Apply rows in order and return their outcomes.

    Usage:
        outcomes = apply_all([
            ("deposit", 1, 1, "1.0"),
            ("dispute", 1, 1, None),
        ])
    """

    def _apply_all(rows):
        return [
            processor.apply(
                Transaction(type=kind, client_id=client, tx_id=tx, amount=amount)
            )
            for kind, client, tx, amount in rows
        ]

    return _apply_all


@pytest.fixture
def balance_of(store):
    """Return (available, held, total, locked) for a client, or None."""

    def _balance_of(client_id):
        account = store.get_account(client_id)
        if account is None:
            return None
        return account.available, account.held, account.total, account.locked

    return _balance_of


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file and return its path."""

    def _write_csv(text, name="transactions.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write_csv


@pytest.fixture(autouse=True)
def reset_ledger_logging():
    yield
    logger = logging.getLogger("ledger")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
