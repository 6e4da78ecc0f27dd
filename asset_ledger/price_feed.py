"""
Reference price holder. One current value, writable only by the reporter
chosen at construction. No history and no staleness tracking.
"""

from .amounts import require_amount, require_identity
from .errors import Unauthorized
from .state import StateComponent


REPORTER_ROLE = "price reporter"


class PriceFeed(StateComponent):
    """Current reference price and the identity allowed to report it"""

    def __init__(self, reporter: str, initial_price: int = 0):
        self._reporter = require_identity(reporter, "reporter")
        self._price = require_amount(initial_price, "price")

    @property
    def reporter(self) -> str:
        return self._reporter

    def get_price(self) -> int:
        return self._price

    def update_price(self, caller: str, new_price: int) -> None:
        # Zero is a valid price at this layer
        if caller != self._reporter:
            raise Unauthorized(caller, REPORTER_ROLE, "update_price")
        require_amount(new_price, "price")
        self._write_attr("_price", new_price)
