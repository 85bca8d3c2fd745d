"""
Tests for the ledger store.

The store holds no business rules, only the structural guard that a
transaction id is logged once.
"""

import pytest

from ledger.exceptions import DuplicateTransactionIdError
from ledger.models.deposit import DepositStatus


class TestAccounts:
    def test_get_or_create_returns_empty_unlocked_account(self, store):
        account = store.get_or_create_account(5)

        assert account.client_id == 5
        assert (account.available, account.held, account.total) == (0, 0, 0)
        assert account.locked is False

    def test_get_or_create_returns_same_instance(self, store):
        first = store.get_or_create_account(5)
        first.available = 100

        assert store.get_or_create_account(5) is first
        assert store.num_accounts == 1

    def test_get_account_does_not_create(self, store):
        assert store.get_account(1) is None
        assert store.num_accounts == 0

    def test_accounts_in_creation_order(self, store):
        for client_id in (3, 1, 2):
            store.get_or_create_account(client_id)

        assert [a.client_id for a in store.accounts()] == [3, 1, 2]

    def test_total_is_derived(self, store):
        account = store.get_or_create_account(1)
        account.available = 7
        account.held = 3

        assert account.total == 10


class TestDepositLog:
    def test_log_and_lookup(self, store):
        record = store.log_deposit(10, 1, 500)

        assert store.lookup_deposit(10) is record
        assert record.status == DepositStatus.NORMAL
        assert store.num_deposits == 1

    def test_lookup_unknown_returns_none(self, store):
        assert store.lookup_deposit(10) is None

    def test_duplicate_deposit_id_raises(self, store):
        store.log_deposit(10, 1, 500)

        with pytest.raises(DuplicateTransactionIdError) as exc_info:
            store.log_deposit(10, 2, 900)

        assert exc_info.value.tx_id == 10
        assert store.lookup_deposit(10).amount == 500

    def test_withdrawal_id_blocks_deposit(self, store):
        store.record_withdrawal(11)

        with pytest.raises(DuplicateTransactionIdError):
            store.log_deposit(11, 1, 500)
        assert store.lookup_deposit(11) is None

    def test_deposit_id_blocks_withdrawal(self, store):
        store.log_deposit(12, 1, 500)

        with pytest.raises(DuplicateTransactionIdError):
            store.record_withdrawal(12)
        assert not store.is_withdrawal(12)

    def test_has_transaction(self, store):
        store.log_deposit(1, 1, 500)
        store.record_withdrawal(2)

        assert store.has_transaction(1)
        assert store.has_transaction(2)
        assert not store.has_transaction(3)
        assert store.num_deposits == 1
