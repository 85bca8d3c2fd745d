"""
Account model — one client's balances.

Each account has:
  - available: funds the client can withdraw
  - held: funds frozen while a deposit is under dispute
  - locked: set by the first chargeback; blocks further withdrawals

Both balances are integer units (see ledger.models.amount). The total is
never stored, only derived as available + held, so it can't disagree with
its parts.

Accounts are created lazily by the ledger store the first time a deposit or
withdrawal names the client.
"""

from dataclasses import dataclass


@dataclass
class Account:
    client_id: int
    available: int = 0
    held: int = 0
    locked: bool = False

    @property
    def total(self) -> int:
        return self.available + self.held
