"""
Liquidity Sub-Ledger

Per-account stake amounts, kept apart from token balances: adding or
removing liquidity records a stake but moves no tokens.

Invariant: total_staked() equals the sum of all stakes, and no stake is
ever negative.
"""

from typing import Dict

from .amounts import checked_add, require_amount, require_identity
from .errors import InsufficientStake
from .state import StateComponent


class LiquidityTracker(StateComponent):
    """Stake amounts by account"""

    def __init__(self):
        self._stakes: Dict[str, int] = {}
        self._total_staked = 0

    def stake_of(self, account: str) -> int:
        return self._stakes.get(account, 0)

    def total_staked(self) -> int:
        return self._total_staked

    def sum_of_stakes(self) -> int:
        return sum(self._stakes.values())

    def add_liquidity(self, caller: str, amount: int) -> None:
        """
        Increase caller's stake by amount. Zero is accepted as a no-op.

        Raises:
            SupplyOverflow: If the pool total would leave the uint256 range
        """
        require_identity(caller, "caller")
        require_amount(amount)
        new_total = checked_add(self._total_staked, amount)
        if amount == 0:
            return

        self._write_attr("_total_staked", new_total)
        self._write(self._stakes, caller, self.stake_of(caller) + amount)

    def remove_liquidity(self, caller: str, amount: int) -> None:
        """
        Decrease caller's stake by amount.

        Raises:
            InsufficientStake: If caller's stake is below amount
        """
        require_identity(caller, "caller")
        require_amount(amount)
        staked = self.stake_of(caller)
        if staked < amount:
            raise InsufficientStake(caller, amount, staked)
        if amount == 0:
            return

        self._write(self._stakes, caller, staked - amount)
        self._write_attr("_total_staked", self._total_staked - amount)
