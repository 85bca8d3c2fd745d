"""
Ingest service — decodes CSV rows into Transactions.

Input format:

    type, client, tx, amount
    deposit, 1, 1, 1.0
    DISPUTE, 1, 1,
    resolve, 1, 1

  - The first non-blank row is a header naming the columns. Names are
    matched case-insensitively and may come in any order. `type`, `client`
    and `tx` are required; `amount` is optional.
  - Whitespace around every field is ignored.
  - Rows may be shorter than the header (a missing or empty trailing amount
    is fine) but never longer.
  - Blank rows are skipped.

A row that can't be decoded is yielded as a RecordParseError carrying its
line number, and reading continues with the next row. Only a header
without the required columns stops the run (TransactionSourceError).
"""

import csv
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from ledger.exceptions import RecordParseError, TransactionSourceError
from ledger.schemas.transaction import Transaction

REQUIRED_COLUMNS = ("type", "client", "tx")
OPTIONAL_COLUMNS = ("amount",)


def read_transactions(
    lines: Iterable[str],
) -> Iterator[Transaction | RecordParseError]:
    """
    Yield a Transaction or a RecordParseError for every non-blank data row.

    Args:
        lines: Any iterable of text lines, typically a file opened with
               newline="".

    Raises:
        TransactionSourceError: If the header lacks a required column.
    """
    reader = csv.reader(lines)
    columns: dict[str, int] | None = None
    width = 0

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            yield RecordParseError(reader.line_num, f"malformed CSV: {exc}")
            continue

        fields = [field.strip() for field in row]
        if not any(fields):
            continue

        if columns is None:
            columns = _parse_header(fields)
            width = len(fields)
            continue

        yield _decode_row(fields, columns, width, reader.line_num)


def _parse_header(fields: list[str]) -> dict[str, int]:
    names = [field.lower() for field in fields]
    missing = [name for name in REQUIRED_COLUMNS if name not in names]
    if missing:
        raise TransactionSourceError(
            f"Header is missing required column(s): {', '.join(missing)}"
        )
    return {
        name: names.index(name)
        for name in REQUIRED_COLUMNS + OPTIONAL_COLUMNS
        if name in names
    }


def _decode_row(
    fields: list[str],
    columns: dict[str, int],
    width: int,
    line_number: int,
) -> Transaction | RecordParseError:
    if len(fields) > width:
        return RecordParseError(
            line_number, f"expected at most {width} fields, got {len(fields)}"
        )

    for name in REQUIRED_COLUMNS:
        if columns[name] >= len(fields) or not fields[columns[name]]:
            return RecordParseError(line_number, f"missing field '{name}'")

    amount_index = columns.get("amount")
    amount = None
    if amount_index is not None and amount_index < len(fields):
        amount = fields[amount_index] or None

    try:
        return Transaction.model_validate(
            {
                "type": fields[columns["type"]],
                "client_id": fields[columns["client"]],
                "tx_id": fields[columns["tx"]],
                "amount": amount,
            }
        )
    except ValidationError as exc:
        return RecordParseError(line_number, _summarize(exc))


def _summarize(exc: ValidationError) -> str:
    """One-line description of every validation failure on a row."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
