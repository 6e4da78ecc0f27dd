"""
Modular Ledger Units

The multi-contract form of the ledger: four independently deployed units,
each owned by whoever constructed it and each with its own lock and
atomicity scope. They share no state with one another.
"""

from typing import Optional

from .access import AccessControl
from .amounts import require_identity
from .config import LedgerConfig, get_config
from .facade import (
    GovernanceOperations, LedgerFacade, LiquidityOperations,
    OracleOperations, TokenOperations
)
from .ledger import TokenLedger
from .liquidity import LiquidityTracker
from .logging_config import log_action
from .price_feed import PriceFeed


class StableCoin(TokenOperations, LedgerFacade):
    """Token unit; the deployer owns it and receives the initial supply"""

    def __init__(self, deployer: str, config: Optional[LedgerConfig] = None):
        config = config or get_config()
        self.ledger = TokenLedger(config.decimals)
        self.access = AccessControl(deployer)
        LedgerFacade.__init__(self, [self.ledger, self.access], "asset_ledger.contracts.token")

        initial_supply = config.initial_supply_units * 10 ** config.decimals
        with self._scope.atomic():
            self.ledger.mint(deployer, initial_supply)

        log_action(
            self.logger, "info", "StableCoin deployed",
            caller=deployer, action="deploy", resource="contract:stable_coin",
            extra={"initial_supply": initial_supply, "decimals": config.decimals}
        )

    @property
    def owner(self) -> str:
        return self.access.owner


class LiquidityPool(LiquidityOperations, LedgerFacade):
    """Stake tracking unit"""

    def __init__(self, deployer: str):
        self._owner = require_identity(deployer, "deployer")
        self.liquidity_tracker = LiquidityTracker()
        LedgerFacade.__init__(self, [self.liquidity_tracker], "asset_ledger.contracts.liquidity")

    @property
    def owner(self) -> str:
        return self._owner


class PriceOracle(OracleOperations, LedgerFacade):
    """Price unit; the deployer is the only reporter"""

    def __init__(self, deployer: str, initial_price: int = 0):
        self.price_feed = PriceFeed(deployer, initial_price)
        LedgerFacade.__init__(self, [self.price_feed], "asset_ledger.contracts.oracle")


class Governance(GovernanceOperations, LedgerFacade):
    """Admin registry; the deployer is the owner"""

    def __init__(self, deployer: str):
        self.access = AccessControl(deployer)
        LedgerFacade.__init__(self, [self.access], "asset_ledger.contracts.governance")

    def add_admin(self, caller: str, account: str) -> None:
        self.grant_admin(caller, account)

    def remove_admin(self, caller: str, account: str) -> None:
        self.revoke_admin(caller, account)
