"""
Test suite for liquidity sub-ledger
"""

import pytest

from asset_ledger.amounts import UINT256_MAX
from asset_ledger.errors import InsufficientStake, SupplyOverflow
from asset_ledger.liquidity import LiquidityTracker


@pytest.fixture
def tracker():
    return LiquidityTracker()


class TestLiquidityTracker:

    def test_add_liquidity(self, tracker):
        tracker.add_liquidity("owner", 1000)

        assert tracker.stake_of("owner") == 1000
        assert tracker.total_staked() == 1000

    def test_remove_more_than_stake(self, tracker):
        tracker.add_liquidity("owner", 1000)

        with pytest.raises(InsufficientStake) as exc_info:
            tracker.remove_liquidity("owner", 1001)

        assert exc_info.value.required == 1001
        assert exc_info.value.available == 1000
        assert tracker.stake_of("owner") == 1000

    def test_remove_entire_stake(self, tracker):
        tracker.add_liquidity("owner", 1000)
        tracker.remove_liquidity("owner", 1000)

        assert tracker.stake_of("owner") == 0
        assert tracker.total_staked() == 0

    def test_zero_add_is_noop(self, tracker):
        tracker.add_liquidity("owner", 0)
        assert tracker.stake_of("owner") == 0

    def test_remove_without_stake(self, tracker):
        with pytest.raises(InsufficientStake):
            tracker.remove_liquidity("user1", 1)

    def test_stakes_are_per_account(self, tracker):
        tracker.add_liquidity("owner", 10)
        tracker.add_liquidity("user1", 5)

        with pytest.raises(InsufficientStake):
            tracker.remove_liquidity("user1", 10)

        assert tracker.total_staked() == 15
        assert tracker.sum_of_stakes() == 15

    def test_total_overflow(self, tracker):
        tracker.add_liquidity("owner", UINT256_MAX)

        with pytest.raises(SupplyOverflow):
            tracker.add_liquidity("user1", 1)

        assert tracker.stake_of("user1") == 0
