"""
Ledger Facade Module

The externally visible operation set. A facade takes an explicit, already
authenticated caller identity, applies the authorization policy, delegates to
the component that owns the affected state and runs the whole call as one
atomic unit:

    transfer, approve, transfer_from, burn,
    add_liquidity, remove_liquidity          any caller
    mint                                     owner
    update_price                             designated reporter
    grant_admin, revoke_admin                owner
    emergency_withdraw                       owner

AssetLedger is the consolidated form composing all four components; the
modular form in contracts.py composes the same operation groups one per unit.
"""

from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

from .access import AccessControl
from .amounts import require_identity
from .config import LedgerConfig, get_config
from .errors import InvalidIdentity, LedgerError, Unauthorized
from .ledger import TokenLedger
from .liquidity import LiquidityTracker
from .logging_config import get_logger, log_action
from .price_feed import PriceFeed
from .state import StateComponent, TransactionScope


class LedgerFacade:
    """Serialized, atomic execution of operations over a set of components"""

    def __init__(self, components: Iterable[StateComponent], logger_name: str):
        self._scope = TransactionScope(components)
        self.logger = get_logger(logger_name)

    def _run(
        self,
        action: str,
        caller: str,
        operation: Callable[[], Any],
        resource: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Execute operation atomically on behalf of caller.

        Any LedgerError rolls back every write the operation made, is logged
        and re-raised to the caller.
        """
        try:
            require_identity(caller, "caller")
            self._check_caller(caller, action)
            with self._scope.atomic():
                result = operation()
        except LedgerError as e:
            log_action(
                self.logger, "warning", f"{action} rejected: {e}",
                caller=caller if isinstance(caller, str) else None,
                action=action, resource=resource,
                error=type(e).__name__, extra=extra
            )
            raise

        log_action(
            self.logger, "info", f"{action} committed",
            caller=caller, action=action, resource=resource, extra=extra
        )
        return result

    def _check_caller(self, caller: str, action: str) -> None:
        """Hook for identities that may never act as an external caller"""

    def _read(self, query: Callable[[], Any]) -> Any:
        with self._scope.locked():
            return query()


class TokenOperations:
    """Token ledger operations; mint is owner-only"""

    ledger: TokenLedger
    access: AccessControl

    def transfer(self, caller: str, to: str, amount: int) -> bool:
        self._run(
            "transfer", caller,
            lambda: self.ledger.transfer(caller, to, amount),
            resource=f"account:{to}",
            extra={"from": caller, "to": to, "amount": amount}
        )
        return True

    def approve(self, caller: str, spender: str, amount: int) -> bool:
        self._run(
            "approve", caller,
            lambda: self.ledger.approve(caller, spender, amount),
            resource=f"allowance:{caller}:{spender}",
            extra={"spender": spender, "amount": amount}
        )
        return True

    def transfer_from(self, caller: str, source: str, to: str, amount: int) -> bool:
        self._run(
            "transfer_from", caller,
            lambda: self.ledger.transfer_from(caller, source, to, amount),
            resource=f"account:{source}",
            extra={"from": source, "to": to, "amount": amount}
        )
        return True

    def mint(self, caller: str, to: str, amount: int) -> None:
        def operation():
            self.access.require_owner(caller, "mint")
            self.ledger.mint(to, amount)

        self._run(
            "mint", caller, operation,
            resource=f"account:{to}",
            extra={"to": to, "amount": amount}
        )

    def burn(self, caller: str, amount: int) -> None:
        self._run(
            "burn", caller,
            lambda: self.ledger.burn(caller, amount),
            resource=f"account:{caller}",
            extra={"amount": amount}
        )

    def balance_of(self, account: str) -> int:
        return self._read(lambda: self.ledger.balance_of(account))

    def allowance(self, owner: str, spender: str) -> int:
        return self._read(lambda: self.ledger.allowance(owner, spender))

    def total_supply(self) -> int:
        return self._read(self.ledger.total_supply)

    def decimals(self) -> int:
        return self.ledger.decimals()


class LiquidityOperations:
    """Stake sub-ledger operations, open to any caller"""

    liquidity_tracker: LiquidityTracker

    def add_liquidity(self, caller: str, amount: int) -> None:
        self._run(
            "add_liquidity", caller,
            lambda: self.liquidity_tracker.add_liquidity(caller, amount),
            resource=f"stake:{caller}",
            extra={"amount": amount}
        )

    def remove_liquidity(self, caller: str, amount: int) -> None:
        self._run(
            "remove_liquidity", caller,
            lambda: self.liquidity_tracker.remove_liquidity(caller, amount),
            resource=f"stake:{caller}",
            extra={"amount": amount}
        )

    def liquidity_of(self, account: str) -> int:
        return self._read(lambda: self.liquidity_tracker.stake_of(account))

    def liquidity(self, account: str) -> int:
        return self.liquidity_of(account)

    def total_liquidity(self) -> int:
        return self._read(self.liquidity_tracker.total_staked)


class OracleOperations:
    """Reference price; only the designated reporter may write"""

    price_feed: PriceFeed

    def update_price(self, caller: str, price: int) -> None:
        self._run(
            "update_price", caller,
            lambda: self.price_feed.update_price(caller, price),
            resource="price",
            extra={"price": price}
        )

    def get_price(self) -> int:
        return self._read(self.price_feed.get_price)

    @property
    def price_reporter(self) -> str:
        return self.price_feed.reporter


class GovernanceOperations:
    """Admin set management; owner-only writes"""

    access: AccessControl

    def grant_admin(self, caller: str, account: str) -> None:
        self._run(
            "grant_admin", caller,
            lambda: self.access.grant_admin(caller, account),
            resource=f"admin:{account}"
        )

    def revoke_admin(self, caller: str, account: str) -> None:
        self._run(
            "revoke_admin", caller,
            lambda: self.access.revoke_admin(caller, account),
            resource=f"admin:{account}"
        )

    def is_admin(self, account: str) -> bool:
        return self._read(lambda: self.access.is_admin(account))

    def admins(self) -> FrozenSet[str]:
        return self._read(self.access.admins)

    @property
    def owner(self) -> str:
        return self.access.owner


class AssetLedger(TokenOperations, LiquidityOperations, OracleOperations,
                  GovernanceOperations, LedgerFacade):
    """
    Consolidated ledger: token, liquidity, price and governance in one unit.

    The initial supply (initial_supply_units * 10**decimals) is minted to the
    owner at construction. The ledger also has its own custody account,
    `address`, which receives tokens like any other account and which only
    the owner can drain through emergency_withdraw. The custody identity is
    never accepted as a caller.
    """

    def __init__(self, owner: str, price_reporter: str, config: Optional[LedgerConfig] = None):
        config = config or get_config()
        require_identity(owner, "owner")
        if owner == config.custody_account:
            raise InvalidIdentity("owner cannot be the ledger's own custody account")
        if price_reporter == config.custody_account:
            raise InvalidIdentity("price reporter cannot be the ledger's own custody account")

        self._address = config.custody_account
        self.ledger = TokenLedger(config.decimals)
        self.access = AccessControl(owner)
        self.price_feed = PriceFeed(price_reporter)
        self.liquidity_tracker = LiquidityTracker()

        LedgerFacade.__init__(
            self,
            [self.ledger, self.access, self.price_feed, self.liquidity_tracker],
            "asset_ledger.facade"
        )

        initial_supply = config.initial_supply_units * 10 ** config.decimals
        with self._scope.atomic():
            self.ledger.mint(owner, initial_supply)

        log_action(
            self.logger, "info", "Ledger created",
            caller=owner, action="deploy", resource=f"ledger:{self._address}",
            extra={
                "initial_supply": initial_supply,
                "decimals": config.decimals,
                "price_reporter": price_reporter
            }
        )

    @property
    def address(self) -> str:
        """Identity of the ledger's own custody account"""
        return self._address

    def custody_balance(self) -> int:
        return self.balance_of(self._address)

    def _check_caller(self, caller: str, action: str) -> None:
        # Custody funds leave only through emergency_withdraw
        if caller == self._address:
            raise Unauthorized(caller, "an external account", action)

    def emergency_withdraw(self, caller: str, amount: int) -> None:
        """
        Move amount out of the ledger's custody account to the owner.

        A zero-sum transfer between tracked accounts, so total supply is
        unchanged.

        Raises:
            Unauthorized: If caller is not the owner
            InsufficientBalance: If custody holds less than amount
        """
        def operation():
            self.access.require_owner(caller, "emergency_withdraw")
            self.ledger.transfer(self._address, caller, amount)

        self._run(
            "emergency_withdraw", caller, operation,
            resource=f"account:{self._address}",
            extra={"amount": amount}
        )

    # Single-contract interface names
    def check_admin(self, account: str) -> bool:
        return self.is_admin(account)

    def grant_admin_rights(self, caller: str, account: str) -> None:
        self.grant_admin(caller, account)

    def revoke_admin_rights(self, caller: str, account: str) -> None:
        self.revoke_admin(caller, account)

    def verify_integrity(self) -> Dict[str, Any]:
        """
        Check the conservation invariants of both sub-ledgers.

        Returns:
            Dictionary with integrity check results
        """
        def query():
            total_supply = self.ledger.total_supply()
            sum_of_balances = self.ledger.sum_of_balances()
            total_staked = self.liquidity_tracker.total_staked()
            sum_of_stakes = self.liquidity_tracker.sum_of_stakes()
            return {
                'valid': total_supply == sum_of_balances and total_staked == sum_of_stakes,
                'total_supply': total_supply,
                'sum_of_balances': sum_of_balances,
                'total_staked': total_staked,
                'sum_of_stakes': sum_of_stakes,
                'accounts': len(self.ledger.accounts())
            }

        return self._read(query)
