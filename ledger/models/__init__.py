"""
Ledger value types.

All models are imported here so other modules can import from
ledger.models directly.
"""

from ledger.models.account import Account  # noqa: F401
from ledger.models.amount import SCALE, format_amount, parse_amount  # noqa: F401
from ledger.models.deposit import DepositRecord, DepositStatus  # noqa: F401
from ledger.models.outcome import Outcome, RejectionReason  # noqa: F401
