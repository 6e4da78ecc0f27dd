"""
Ledger error taxonomy.

Every error aborts the single operation that raised it; the facade rolls
back any state touched by that operation before the error reaches the caller.
"""

from typing import Optional


class LedgerError(Exception):
    """Base exception for all ledger errors."""
    pass


class Unauthorized(LedgerError):
    """Raised when the caller does not hold the role an operation requires."""

    def __init__(self, caller: str, required_role: str, operation: Optional[str] = None):
        self.caller = caller
        self.required_role = required_role
        self.operation = operation
        target = f" for {operation}" if operation else ""
        super().__init__(f"{caller} is not {required_role}{target}")


class _ShortfallError(LedgerError):
    """Shared shape for 'required exceeds available' failures."""

    subject = "amount"

    def __init__(self, account: str, required: int, available: int):
        self.account = account
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient {self.subject} for {account}: "
            f"required={required}, available={available}"
        )


class InsufficientBalance(_ShortfallError):
    """Raised when a debit would take a balance below zero."""
    subject = "balance"


class InsufficientAllowance(LedgerError):
    """Raised when a delegated spend exceeds the remaining allowance."""

    def __init__(self, owner: str, spender: str, required: int, available: int):
        self.owner = owner
        self.spender = spender
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient allowance from {owner} to {spender}: "
            f"required={required}, available={available}"
        )


class InsufficientStake(_ShortfallError):
    """Raised when a liquidity removal exceeds the recorded stake."""
    subject = "stake"


class SupplyOverflow(LedgerError):
    """Raised when a tracked total would exceed the uint256 range."""

    def __init__(self, current: int, amount: int, limit: int):
        self.current = current
        self.amount = amount
        self.limit = limit
        super().__init__(f"Adding {amount} to {current} exceeds {limit}")


class InvalidAmount(LedgerError, ValueError):
    """Raised for amounts that are not unsigned 256-bit integers."""
    pass


class InvalidIdentity(LedgerError, ValueError):
    """Raised for identities that are not non-empty strings."""
    pass
