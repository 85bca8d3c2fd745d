"""
Statement service — renders final balances as CSV.

Output format:

    client,available,held,total,locked
    1,1.5000,0.0000,1.5000,false
    2,0.0000,0.0000,0.0000,true

Amounts always carry 4 fractional digits and `locked` is lowercase.
Row order follows the balances passed in; the processor can sort them by
client id when a stable report is needed.
"""

import csv
from collections.abc import Iterable
from typing import IO

from ledger.models.amount import format_amount
from ledger.schemas.account import AccountBalance

HEADER = ["client", "available", "held", "total", "locked"]


def balance_row(balance: AccountBalance) -> list[str]:
    return [
        str(balance.client_id),
        format_amount(balance.available),
        format_amount(balance.held),
        format_amount(balance.total),
        "true" if balance.locked else "false",
    ]


def write_balances_csv(balances: Iterable[AccountBalance], stream: IO[str]) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(HEADER)
    for balance in balances:
        writer.writerow(balance_row(balance))
