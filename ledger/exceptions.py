"""
Custom exception classes for the ledger.

Only structural problems are exceptions. Business-rule violations
(insufficient funds, disputing the wrong client's deposit, and so on) are
returned as a rejected Outcome by the transaction processor and never
raised.

Exception hierarchy:
    LedgerError (base)
    ├── DuplicateTransactionIdError — tx id already used by a deposit/withdrawal
    ├── RecordParseError            — one input row could not be decoded
    └── TransactionSourceError      — the input itself is unreadable (fatal)
"""


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class DuplicateTransactionIdError(LedgerError):
    """
    Raised by the ledger store when a transaction id is logged twice.

    The processor catches this and reports a `duplicate_transaction_id`
    rejection, so it never escapes a call to `apply()`.
    """

    def __init__(self, tx_id: int):
        self.tx_id = tx_id
        super().__init__(f"Transaction {tx_id} already exists")


class RecordParseError(LedgerError):
    """
    A single input row that could not be decoded into a Transaction.

    The reader yields these instead of raising them, so one bad row never
    stops the run.

    Attributes:
        line_number: 1-based line of the row in the source file.
    """

    def __init__(self, line_number: int, detail: str):
        self.line_number = line_number
        super().__init__(f"line {line_number}: {detail}")


class TransactionSourceError(LedgerError):
    """Raised when the transaction source cannot be opened or read at all."""
