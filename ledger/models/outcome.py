"""
Outcome of applying one transaction.

A rejected transaction leaves the ledger exactly as it was. The reason is
carried back to the caller so it can be logged or counted; the processor
itself never raises for a business-rule violation.
"""

import enum
from dataclasses import dataclass


class RejectionReason(str, enum.Enum):
    """Why the processor refused a transaction."""
    DUPLICATE_TRANSACTION_ID = "duplicate_transaction_id"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_LOCKED = "account_locked"
    UNKNOWN_TRANSACTION = "unknown_transaction"
    NOT_A_DEPOSIT = "not_a_deposit"             # tx id belongs to a withdrawal
    CLIENT_MISMATCH = "client_mismatch"
    ALREADY_DISPUTED = "already_disputed"
    NOT_DISPUTED = "not_disputed"
    CHARGED_BACK = "charged_back"


@dataclass(frozen=True)
class Outcome:
    applied: bool
    reason: RejectionReason | None = None

    @classmethod
    def ok(cls) -> "Outcome":
        return cls(applied=True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "Outcome":
        return cls(applied=False, reason=reason)

    def __bool__(self) -> bool:
        return self.applied
