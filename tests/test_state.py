"""
Test suite for atomic state module

Tests undo logging and all-or-nothing transaction scopes.
"""

import threading

import pytest

from asset_ledger.errors import InsufficientBalance
from asset_ledger.ledger import TokenLedger
from asset_ledger.liquidity import LiquidityTracker
from asset_ledger.state import StateComponent, TransactionScope, UndoLog


class Counter(StateComponent):
    def __init__(self):
        self.value = 0
        self.items = {}

    def bump(self, key, value):
        self._write_attr("value", self.value + 1)
        self._write(self.items, key, value)


class TestUndoLog:
    """Test undo log replay"""

    def test_rollback_restores_items_and_attributes(self):
        counter = Counter()
        counter.items["a"] = 1
        log = UndoLog()
        counter.bind_undo_log(log)

        counter.bump("a", 2)
        counter.bump("b", 3)
        assert len(log) == 4

        log.rollback()

        assert counter.value == 0
        assert counter.items == {"a": 1}

    def test_delete_is_undone(self):
        counter = Counter()
        counter.items["a"] = 1
        log = UndoLog()
        counter.bind_undo_log(log)

        counter._delete(counter.items, "a")
        assert counter.items == {}

        log.rollback()
        assert counter.items == {"a": 1}

    def test_writes_without_log_are_plain(self):
        counter = Counter()
        counter.bump("a", 1)
        assert counter.items == {"a": 1}


class TestTransactionScope:
    """Test atomic execution"""

    def test_commit_keeps_changes(self):
        counter = Counter()
        scope = TransactionScope([counter])

        with scope.atomic():
            counter.bump("a", 1)

        assert counter.value == 1
        assert counter._undo_log is None
        assert not scope.in_transaction

    def test_failure_rolls_back_every_component(self):
        ledger = TokenLedger()
        tracker = LiquidityTracker()
        scope = TransactionScope([ledger, tracker])
        ledger.mint("alice", 100)

        with pytest.raises(InsufficientBalance):
            with scope.atomic():
                tracker.add_liquidity("alice", 50)
                ledger.transfer("alice", "bob", 60)
                ledger.transfer("alice", "carol", 60)

        assert tracker.stake_of("alice") == 0
        assert tracker.total_staked() == 0
        assert ledger.balance_of("alice") == 100
        assert ledger.balance_of("bob") == 0
        assert "bob" not in ledger.accounts()

    def test_non_ledger_errors_also_roll_back(self):
        counter = Counter()
        scope = TransactionScope([counter])

        with pytest.raises(RuntimeError):
            with scope.atomic():
                counter.bump("a", 1)
                raise RuntimeError("boom")

        assert counter.value == 0
        assert counter.items == {}

    def test_nested_scope_joins_outer(self):
        counter = Counter()
        scope = TransactionScope([counter])

        with pytest.raises(RuntimeError):
            with scope.atomic():
                with scope.atomic():
                    counter.bump("a", 1)
                assert scope.in_transaction
                raise RuntimeError("outer failure")

        assert counter.value == 0

    def test_operations_are_serialized(self):
        ledger = TokenLedger()
        scope = TransactionScope([ledger])
        ledger.mint("alice", 10_000)

        def worker(name):
            for _ in range(100):
                with scope.atomic():
                    ledger.transfer("alice", name, 10)

        threads = [threading.Thread(target=worker, args=(f"user{i}",)) for i in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert ledger.balance_of("alice") == 5000
        assert ledger.total_supply() == ledger.sum_of_balances()
