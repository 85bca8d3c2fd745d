"""
Deposit record — one entry in the dispute log.

Every applied deposit is logged here, keyed by its transaction id in the
ledger store, so later dispute/resolve/chargeback rows can find the amount
and the owning client. Withdrawals are never logged: only deposits can be
disputed.

Status lifecycle:

    NORMAL ──dispute──> DISPUTED ──chargeback──> CHARGED_BACK (terminal)
       ^                   │
       └─────resolve───────┘

Records are never deleted. Keeping charged-back deposits around is what
stops a replayed dispute from moving money a second time.
"""

import enum
from dataclasses import dataclass


class DepositStatus(str, enum.Enum):
    """Where a logged deposit is in the dispute lifecycle."""
    NORMAL = "normal"
    DISPUTED = "disputed"
    CHARGED_BACK = "charged_back"


@dataclass
class DepositRecord:
    client_id: int
    amount: int
    status: DepositStatus = DepositStatus.NORMAL
