"""
Unsigned Amount Module

Token quantities are unsigned 256-bit integers in base units. Nothing in the
ledger ever wraps: values are validated on entry and every addition is
checked against the uint256 ceiling. NEVER uses float for token values.
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Union

from .errors import InvalidAmount, InvalidIdentity, SupplyOverflow

UINT256_MAX = 2 ** 256 - 1
UINT256_DIGITS = len(str(UINT256_MAX))
DEFAULT_DECIMALS = 18


def require_amount(amount: Any, name: str = "amount") -> int:
    """
    Ensure `amount` is an integer in [0, 2**256 - 1].

    bool is rejected even though it subclasses int.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"{name} must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {amount}")
    if amount > UINT256_MAX:
        raise InvalidAmount(f"{name} exceeds uint256 range")
    return amount


def require_identity(identity: Any, name: str = "identity") -> str:
    """Ensure an account identity is a non-empty string"""
    if not isinstance(identity, str) or not identity.strip():
        raise InvalidIdentity(f"{name} must be a non-empty string")
    return identity


def checked_add(current: int, amount: int) -> int:
    """Add two uint256 values, raising SupplyOverflow instead of wrapping"""
    total = current + amount
    if total > UINT256_MAX:
        raise SupplyOverflow(current, amount, UINT256_MAX)
    return total


def parse_amount(value: Union[str, int]) -> int:
    """
    Parse a base-unit amount from its wire representation.

    Accepts decimal integer strings (as used over HTTP, since uint256 does not
    fit in a JSON-safe integer) or ints.
    """
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidAmount(f"amount must be a non-negative integer string, got {value!r}")
        # Bound the length before int() so huge strings never reach the converter
        if len(text.lstrip("0")) > UINT256_DIGITS:
            raise InvalidAmount("amount exceeds uint256 range")
        value = int(text)
    return require_amount(value)


def to_base_units(whole: Union[int, str, Decimal], decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Convert a human-scale token quantity to base units.

    to_base_units(1000, 18) == 1000 * 10**18. Fractions finer than the token's
    precision are rejected rather than rounded.
    """
    with localcontext() as ctx:
        # uint256 needs 78 significant digits
        ctx.prec = 100
        try:
            quantity = Decimal(str(whole))
        except InvalidOperation:
            raise InvalidAmount(f"not a number: {whole!r}")
        if not quantity.is_finite():
            raise InvalidAmount(f"not a finite number: {whole!r}")

        scaled = quantity.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise InvalidAmount(f"{whole} has more than {decimals} decimal places")
        return require_amount(int(scaled))


def format_units(amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format base units for display, e.g. 1500000000000000000 -> '1.5'"""
    require_amount(amount)
    if decimals == 0:
        return str(amount)
    whole, fraction = divmod(amount, 10 ** decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_text:
        return str(whole)
    return f"{whole}.{fraction_text}"
