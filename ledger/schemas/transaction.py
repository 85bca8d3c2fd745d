"""
Pydantic schema for one input transaction.

This is the boundary where loosely formatted input becomes a typed
Transaction: the type is matched case-insensitively, ids are range-checked
to their integer widths, and amounts are converted from decimal text into
integer units (see ledger.models.amount).

Amount rules:
  - deposit and withdrawal must carry a positive amount
  - dispute, resolve and chargeback refer to an earlier deposit by tx id;
    any amount they carry is ignored
"""

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ledger.models.amount import parse_amount

MAX_CLIENT_ID = 2**16 - 1
MAX_TX_ID = 2**32 - 1


class TransactionType(str, enum.Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def carries_amount(self) -> bool:
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


class Transaction(BaseModel):
    """
    A validated input record.

    `amount` is given in currency units ("1.5", 1.5 or Decimal("1.5")) and
    is held as scaled integer units of 1/10,000 once validated, so
    Transaction(amount=1).amount == 10000.
    """

    model_config = ConfigDict(frozen=True)

    type: TransactionType
    client_id: int = Field(ge=0, le=MAX_CLIENT_ID)
    tx_id: int = Field(ge=0, le=MAX_TX_ID)
    amount: int | None = Field(
        default=None,
        description="Amount in units of 1/10,000 (deposit and withdrawal only)",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_reference_amount(cls, data):
        """Dispute/resolve/chargeback take their amount from the logged deposit."""
        if isinstance(data, dict):
            kind = data.get("type")
            if isinstance(kind, str) and kind.strip().lower() in _REFERENCE_TYPES:
                data = {**data, "amount": None}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount(cls, value):
        """Every input form is in currency units: 1, 1.0 and "1" are all 10,000 units."""
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        if isinstance(value, str):
            return parse_amount(value) if value.strip() else None
        if isinstance(value, (int, Decimal, float)):
            return parse_amount(str(value))
        return value

    @model_validator(mode="after")
    def amount_required(self):
        if self.type.carries_amount:
            if self.amount is None:
                raise ValueError(f"{self.type.value} requires an amount")
            if self.amount <= 0:
                raise ValueError("amount must be positive")
        return self


_REFERENCE_TYPES = {
    kind.value for kind in TransactionType if not kind.carries_amount
}
