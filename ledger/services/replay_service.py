"""
Replay service — drives a whole run.

Feeds every decoded row to the transaction processor in input order and
keeps a tally of what happened. The two failure tiers are handled
differently:

  - a row that could not be decoded is logged at WARNING and skipped
  - a decoded transaction the processor refuses is counted by reason
    (the processor itself logs it at DEBUG)

Neither stops the run. Only an unreadable source raises, as
TransactionSourceError.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from ledger.exceptions import RecordParseError, TransactionSourceError
from ledger.logging_setup import get_logger
from ledger.models.outcome import RejectionReason
from ledger.schemas.transaction import Transaction
from ledger.services.ingest_service import read_transactions
from ledger.services.transaction_service import TransactionProcessor

logger = get_logger(__name__)


@dataclass
class ReplaySummary:
    """Counts for one run."""
    applied: int = 0
    malformed: int = 0
    rejected: Counter[RejectionReason] = field(default_factory=Counter)

    @property
    def total_rejected(self) -> int:
        return sum(self.rejected.values())


def replay(
    records: Iterable[Transaction | RecordParseError],
    processor: TransactionProcessor,
) -> ReplaySummary:
    """Apply every transaction in `records`, skipping parse failures."""
    summary = ReplaySummary()

    for record in records:
        if isinstance(record, RecordParseError):
            summary.malformed += 1
            logger.warning("Skipping record, %s", record.detail)
            continue

        outcome = processor.apply(record)
        if outcome.applied:
            summary.applied += 1
        else:
            summary.rejected[outcome.reason] += 1

    logger.info(
        "Replay finished: %d applied, %d rejected, %d malformed",
        summary.applied,
        summary.total_rejected,
        summary.malformed,
    )
    return summary


def replay_file(
    path: str | PathLike[str],
    processor: TransactionProcessor,
) -> ReplaySummary:
    """
    Replay a CSV file of transactions.

    Raises:
        TransactionSourceError: If the file can't be opened or read, or its
                                header is unusable.
    """
    try:
        with open(path, newline="", encoding="utf-8-sig") as handle:
            return replay(read_transactions(handle), processor)
    except (OSError, UnicodeDecodeError) as exc:
        raise TransactionSourceError(f"Cannot read {path}: {exc}") from exc
