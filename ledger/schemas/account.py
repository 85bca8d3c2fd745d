"""
Pydantic schema for the final balance report.

All monetary amounts are integer units (1/10,000 of the currency);
formatting to 4 decimal places happens in the statement writer.
"""

from pydantic import BaseModel, ConfigDict


class AccountBalance(BaseModel):
    """
    Read-only snapshot of one account after the run.

    Built from an Account via `AccountBalance.model_validate(account)`;
    `total` is copied from the account's derived property.
    """
    client_id: int
    available: int
    held: int
    total: int
    locked: bool

    model_config = ConfigDict(from_attributes=True, frozen=True)
