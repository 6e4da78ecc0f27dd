"""
Token Ledger Engine

Pure accounting for a single fungible token: balances, delegated allowances
and total supply. No authorization happens here; facades decide who may call
what. Every operation validates all of its preconditions before its first
write, so a rejected call never leaves partial state behind.

Invariant: total supply equals the sum of all balances between operations.
"""

from typing import Dict, List, Tuple

from .amounts import DEFAULT_DECIMALS, checked_add, require_amount, require_identity
from .errors import InsufficientAllowance, InsufficientBalance
from .state import StateComponent


class TokenLedger(StateComponent):
    """
    Balances and allowances for one token.

    Accounts are created implicitly on first credit and never removed; a
    zero balance is a valid terminal state.
    """

    def __init__(self, decimals: int = DEFAULT_DECIMALS):
        if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= 255:
            raise ValueError("decimals must fit in uint8")
        self._decimals = decimals
        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._total_supply = 0

    # Reads

    def decimals(self) -> int:
        return self._decimals

    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((owner, spender), 0)

    def accounts(self) -> List[str]:
        """Every account that has ever held a balance"""
        return sorted(self._balances)

    def sum_of_balances(self) -> int:
        return sum(self._balances.values())

    # Mutations

    def transfer(self, caller: str, to: str, amount: int) -> None:
        """
        Move amount from caller to `to`.

        Raises:
            InsufficientBalance: If caller holds less than amount
        """
        require_identity(caller, "caller")
        require_identity(to, "to")
        require_amount(amount)
        self._move(caller, to, amount)

    def approve(self, caller: str, spender: str, amount: int) -> None:
        """Set (not add to) the amount spender may move out of caller's balance"""
        require_identity(caller, "caller")
        require_identity(spender, "spender")
        require_amount(amount)
        self._write(self._allowances, (caller, spender), amount)

    def transfer_from(self, spender: str, source: str, to: str, amount: int) -> None:
        """
        Spend an allowance: move amount from source to `to` on source's behalf.

        The allowance is checked before the balance.

        Raises:
            InsufficientAllowance: If spender's remaining allowance is below amount
            InsufficientBalance: If source holds less than amount
        """
        require_identity(spender, "spender")
        require_identity(source, "from")
        require_identity(to, "to")
        require_amount(amount)

        remaining = self.allowance(source, spender)
        if remaining < amount:
            raise InsufficientAllowance(source, spender, amount, remaining)
        self._require_balance(source, amount)

        self._write(self._allowances, (source, spender), remaining - amount)
        self._move(source, to, amount)

    def mint(self, to: str, amount: int) -> None:
        """
        Create amount new tokens in `to`'s balance.

        Raises:
            SupplyOverflow: If total supply would leave the uint256 range
        """
        require_identity(to, "to")
        require_amount(amount)
        new_supply = checked_add(self._total_supply, amount)

        self._write_attr("_total_supply", new_supply)
        self._write(self._balances, to, self.balance_of(to) + amount)

    def burn(self, caller: str, amount: int) -> None:
        """
        Destroy amount tokens from caller's own balance.

        Raises:
            InsufficientBalance: If caller holds less than amount
        """
        require_identity(caller, "caller")
        require_amount(amount)
        self._require_balance(caller, amount)

        self._write(self._balances, caller, self.balance_of(caller) - amount)
        self._write_attr("_total_supply", self._total_supply - amount)

    def _require_balance(self, account: str, amount: int) -> None:
        available = self.balance_of(account)
        if available < amount:
            raise InsufficientBalance(account, amount, available)

    def _move(self, source: str, dest: str, amount: int) -> None:
        self._require_balance(source, amount)
        if source == dest:
            return
        # Balances are bounded by total supply, so the credit cannot overflow
        self._write(self._balances, source, self.balance_of(source) - amount)
        self._write(self._balances, dest, self.balance_of(dest) + amount)
