"""
Ledger store — owns every Account and every logged deposit for one run.

This module is pure storage:
  - accounts, keyed by client id, created lazily with zero balances
  - the dispute log: one DepositRecord per applied deposit, keyed by tx id
  - the set of transaction ids already used by a deposit or withdrawal

The only rule enforced here is structural: a transaction id can be logged
once. Everything else (funds, locks, dispute status) is decided by the
transaction processor.

Memory:
  The dispute log is never pruned. A chargeback may reference a deposit
  seen arbitrarily long ago, so memory grows with the number of deposits.
"""

from collections.abc import Iterator

from ledger.exceptions import DuplicateTransactionIdError
from ledger.models.account import Account
from ledger.models.deposit import DepositRecord


class LedgerStore:
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._deposits: dict[int, DepositRecord] = {}
        self._withdrawal_ids: set[int] = set()

    # --- Accounts ---

    def get_or_create_account(self, client_id: int) -> Account:
        """Return the client's account, creating an empty unlocked one if needed."""
        account = self._accounts.get(client_id)
        if account is None:
            account = Account(client_id=client_id)
            self._accounts[client_id] = account
        return account

    def get_account(self, client_id: int) -> Account | None:
        return self._accounts.get(client_id)

    def accounts(self) -> Iterator[Account]:
        """Iterate over every account ever referenced, in creation order."""
        return iter(self._accounts.values())

    @property
    def num_accounts(self) -> int:
        return len(self._accounts)

    # --- Transaction ids ---

    def has_transaction(self, tx_id: int) -> bool:
        """True if tx_id was used by an applied deposit or withdrawal."""
        return tx_id in self._deposits or tx_id in self._withdrawal_ids

    def log_deposit(self, tx_id: int, client_id: int, amount: int) -> DepositRecord:
        """
        Add a deposit to the dispute log with status NORMAL.

        Raises:
            DuplicateTransactionIdError: If tx_id is already in use.
        """
        if self.has_transaction(tx_id):
            raise DuplicateTransactionIdError(tx_id)
        record = DepositRecord(client_id=client_id, amount=amount)
        self._deposits[tx_id] = record
        return record

    def record_withdrawal(self, tx_id: int) -> None:
        """
        Remember a withdrawal id so it can't be reused.

        Only the id is kept; withdrawals are not disputable.

        Raises:
            DuplicateTransactionIdError: If tx_id is already in use.
        """
        if self.has_transaction(tx_id):
            raise DuplicateTransactionIdError(tx_id)
        self._withdrawal_ids.add(tx_id)

    def is_withdrawal(self, tx_id: int) -> bool:
        return tx_id in self._withdrawal_ids

    def lookup_deposit(self, tx_id: int) -> DepositRecord | None:
        return self._deposits.get(tx_id)

    @property
    def num_deposits(self) -> int:
        return len(self._deposits)
