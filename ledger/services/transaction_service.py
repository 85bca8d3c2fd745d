"""
Transaction service — the core ledger business logic.

THIS IS THE MOST CRITICAL FILE IN THE PROJECT. It applies one validated
Transaction at a time to the ledger store:

  - deposit:     available += amount, deposit logged for later disputes
  - withdrawal:  available -= amount, if the account is unlocked and can cover it
  - dispute:     moves a logged deposit's amount from available to held
  - resolve:     moves it back from held to available
  - chargeback:  removes it from held and locks the account

Rejections:
  A transaction whose preconditions fail is refused and the ledger is left
  exactly as it was. `apply()` returns Outcome.rejected(reason) rather than
  raising, so the caller decides whether to log or count it. Nothing in
  here raises for bad-but-well-formed input.

Ordering:
  Transactions are applied strictly in the order given. That order is the
  only consistency mechanism: duplicate disputes and replays after a
  chargeback are caught because the dispute log already reflects every
  earlier row. There is one writer and no concurrent readers.

Locking:
  A locked account refuses withdrawals only. Deposits, and the dispute
  lifecycle of deposits already made, continue to apply.

Non-negativity:
  A dispute needs the disputed amount to still be available. If the client
  has since withdrawn the funds, the dispute is refused as insufficient
  funds rather than driving `available` negative.
"""

from ledger.exceptions import DuplicateTransactionIdError
from ledger.logging_setup import get_logger
from ledger.models.deposit import DepositRecord, DepositStatus
from ledger.models.outcome import Outcome, RejectionReason
from ledger.schemas.account import AccountBalance
from ledger.schemas.transaction import Transaction, TransactionType
from ledger.services.ledger_store import LedgerStore

logger = get_logger(__name__)


class TransactionProcessor:
    """Applies transactions to a LedgerStore it owns for the whole run."""

    def __init__(self, store: LedgerStore | None = None) -> None:
        self.store = store if store is not None else LedgerStore()
        self._handlers = {
            TransactionType.DEPOSIT: self._deposit,
            TransactionType.WITHDRAWAL: self._withdrawal,
            TransactionType.DISPUTE: self._dispute,
            TransactionType.RESOLVE: self._resolve,
            TransactionType.CHARGEBACK: self._chargeback,
        }

    def apply(self, transaction: Transaction) -> Outcome:
        """
        Apply one transaction.

        Returns:
            Outcome.ok() if the ledger changed, otherwise
            Outcome.rejected(reason) with the ledger untouched.
        """
        outcome = self._handlers[transaction.type](transaction)
        if not outcome.applied:
            logger.debug(
                "Rejected %s tx=%d client=%d: %s",
                transaction.type.value,
                transaction.tx_id,
                transaction.client_id,
                outcome.reason.value,
            )
        return outcome

    def balances(self, sort: bool = False) -> list[AccountBalance]:
        """
        Snapshot every account as an AccountBalance.

        Args:
            sort: Order by client id. Otherwise accounts come in the order
                  they were first referenced.
        """
        accounts = list(self.store.accounts())
        if sort:
            accounts.sort(key=lambda account: account.client_id)
        return [AccountBalance.model_validate(account) for account in accounts]

    # ------------------------------------------------------------------
    # Deposit / withdrawal
    # ------------------------------------------------------------------

    def _deposit(self, transaction: Transaction) -> Outcome:
        try:
            self.store.log_deposit(
                transaction.tx_id, transaction.client_id, transaction.amount
            )
        except DuplicateTransactionIdError:
            return Outcome.rejected(RejectionReason.DUPLICATE_TRANSACTION_ID)

        account = self.store.get_or_create_account(transaction.client_id)
        account.available += transaction.amount
        return Outcome.ok()

    def _withdrawal(self, transaction: Transaction) -> Outcome:
        if self.store.has_transaction(transaction.tx_id):
            return Outcome.rejected(RejectionReason.DUPLICATE_TRANSACTION_ID)

        account = self.store.get_or_create_account(transaction.client_id)
        if account.locked:
            return Outcome.rejected(RejectionReason.ACCOUNT_LOCKED)
        if account.available < transaction.amount:
            return Outcome.rejected(RejectionReason.INSUFFICIENT_FUNDS)

        self.store.record_withdrawal(transaction.tx_id)
        account.available -= transaction.amount
        return Outcome.ok()

    # ------------------------------------------------------------------
    # Dispute lifecycle
    # ------------------------------------------------------------------

    def _find_deposit(
        self, transaction: Transaction
    ) -> tuple[DepositRecord | None, RejectionReason | None]:
        """Look up the deposit a dispute/resolve/chargeback refers to."""
        record = self.store.lookup_deposit(transaction.tx_id)
        if record is None:
            if self.store.is_withdrawal(transaction.tx_id):
                return None, RejectionReason.NOT_A_DEPOSIT
            return None, RejectionReason.UNKNOWN_TRANSACTION
        if record.client_id != transaction.client_id:
            return None, RejectionReason.CLIENT_MISMATCH
        if record.status is DepositStatus.CHARGED_BACK:
            return None, RejectionReason.CHARGED_BACK
        return record, None

    def _dispute(self, transaction: Transaction) -> Outcome:
        record, reason = self._find_deposit(transaction)
        if record is None:
            return Outcome.rejected(reason)
        if record.status is DepositStatus.DISPUTED:
            return Outcome.rejected(RejectionReason.ALREADY_DISPUTED)

        account = self.store.get_or_create_account(record.client_id)
        if account.available < record.amount:
            return Outcome.rejected(RejectionReason.INSUFFICIENT_FUNDS)

        account.available -= record.amount
        account.held += record.amount
        record.status = DepositStatus.DISPUTED
        return Outcome.ok()

    def _resolve(self, transaction: Transaction) -> Outcome:
        record, reason = self._find_deposit(transaction)
        if record is None:
            return Outcome.rejected(reason)
        if record.status is not DepositStatus.DISPUTED:
            return Outcome.rejected(RejectionReason.NOT_DISPUTED)

        account = self.store.get_or_create_account(record.client_id)
        account.held -= record.amount
        account.available += record.amount
        record.status = DepositStatus.NORMAL
        return Outcome.ok()

    def _chargeback(self, transaction: Transaction) -> Outcome:
        record, reason = self._find_deposit(transaction)
        if record is None:
            return Outcome.rejected(reason)
        if record.status is not DepositStatus.DISPUTED:
            return Outcome.rejected(RejectionReason.NOT_DISPUTED)

        account = self.store.get_or_create_account(record.client_id)
        account.held -= record.amount
        account.locked = True
        record.status = DepositStatus.CHARGED_BACK
        return Outcome.ok()
