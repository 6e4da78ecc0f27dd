"""
Asset Ledger

A single-process authoritative token ledger with delegated allowances,
a staked-liquidity sub-ledger, a reporter-fed reference price and
owner/admin governance. Every operation is atomic and authorized against
an explicit caller identity.
"""

from .errors import (
    LedgerError, Unauthorized, InsufficientBalance, InsufficientAllowance,
    InsufficientStake, SupplyOverflow, InvalidAmount, InvalidIdentity
)
from .facade import AssetLedger
from .contracts import StableCoin, LiquidityPool, PriceOracle, Governance

__version__ = "1.0.0"

__all__ = [
    "AssetLedger",
    "StableCoin",
    "LiquidityPool",
    "PriceOracle",
    "Governance",
    "LedgerError",
    "Unauthorized",
    "InsufficientBalance",
    "InsufficientAllowance",
    "InsufficientStake",
    "SupplyOverflow",
    "InvalidAmount",
    "InvalidIdentity",
]
