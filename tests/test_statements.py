"""
Tests for the balances report.

These tests verify:
  - The CSV header and the 4-decimal amount format
  - locked renders as lowercase true/false
  - One row per account ever referenced, optionally sorted by client id
"""

import io

from ledger.schemas.account import AccountBalance
from ledger.services.statement_service import balance_row, write_balances_csv


def render(balances):
    stream = io.StringIO()
    write_balances_csv(balances, stream)
    return stream.getvalue()


class TestBalanceRow:
    def test_row_format(self):
        balance = AccountBalance(
            client_id=1, available=15_000, held=0, total=15_000, locked=False
        )

        assert balance_row(balance) == ["1", "1.5000", "0.0000", "1.5000", "false"]

    def test_locked_row(self):
        balance = AccountBalance(client_id=2, available=0, held=0, total=0, locked=True)

        assert balance_row(balance)[-1] == "true"


class TestWriteBalances:
    def test_header_only_when_no_accounts(self):
        assert render([]) == "client,available,held,total,locked\n"

    def test_processor_balances(self, apply_all, processor):
        apply_all([
            ("deposit", 2, 1, "2.0"),
            ("deposit", 1, 2, "1.0"),
            ("deposit", 1, 3, "2.0"),
            ("withdrawal", 1, 4, "1.5"),
            ("dispute", 2, 1, None),
        ])

        output = render(processor.balances(sort=True))

        assert output == (
            "client,available,held,total,locked\n"
            "1,1.5000,0.0000,1.5000,false\n"
            "2,0.0000,2.0000,2.0000,false\n"
        )

    def test_unsorted_keeps_first_reference_order(self, apply_all, processor):
        apply_all([
            ("deposit", 9, 1, "1.0"),
            ("deposit", 3, 2, "1.0"),
            ("withdrawal", 5, 3, "1.0"),
        ])

        ids = [b.client_id for b in processor.balances()]

        assert ids == [9, 3, 5]

    def test_balances_are_snapshots(self, apply_all, processor, store):
        """Mutating the ledger later doesn't change an earlier report."""
        apply_all([("deposit", 1, 1, "1.0")])
        balances = processor.balances()

        apply_all([("deposit", 1, 2, "1.0")])

        assert balances[0].available == 10_000
        assert store.get_account(1).available == 20_000
