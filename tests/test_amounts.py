"""
Test suite for amount validation and unit conversion
"""

from decimal import Decimal

import pytest

from asset_ledger.amounts import (
    UINT256_MAX, checked_add, format_units, parse_amount, require_amount,
    require_identity, to_base_units
)
from asset_ledger.errors import InvalidAmount, InvalidIdentity, SupplyOverflow


class TestRequireAmount:

    def test_accepts_range_bounds(self):
        assert require_amount(0) == 0
        assert require_amount(UINT256_MAX) == UINT256_MAX

    @pytest.mark.parametrize("value", [-1, UINT256_MAX + 1, 1.0, "10", True, None])
    def test_rejects_non_uint256(self, value):
        with pytest.raises(InvalidAmount):
            require_amount(value)

    def test_invalid_amount_is_value_error(self):
        with pytest.raises(ValueError):
            require_amount(-5)


class TestRequireIdentity:

    def test_accepts_string(self):
        assert require_identity("0x1001") == "0x1001"

    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidIdentity):
            require_identity(value)


class TestCheckedAdd:

    def test_adds(self):
        assert checked_add(2, 3) == 5

    def test_overflow(self):
        with pytest.raises(SupplyOverflow) as exc_info:
            checked_add(UINT256_MAX, 1)

        assert exc_info.value.limit == UINT256_MAX


class TestParseAmount:

    def test_parses_string(self):
        assert parse_amount("1000000000000000000000") == 10 ** 21

    def test_strips_whitespace(self):
        assert parse_amount(" 42 ") == 42

    @pytest.mark.parametrize("value", ["-1", "1.5", "abc", "", "1e18"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidAmount):
            parse_amount(value)

    def test_uint256_boundary(self):
        assert parse_amount(str(2 ** 256 - 1)) == 2 ** 256 - 1
        assert parse_amount("000" + str(2 ** 256 - 1)) == 2 ** 256 - 1

        with pytest.raises(InvalidAmount):
            parse_amount(str(2 ** 256))

    def test_rejects_oversized_digit_string(self):
        with pytest.raises(InvalidAmount):
            parse_amount("9" * 5000)


class TestUnitConversion:

    def test_whole_tokens(self):
        assert to_base_units(1000, 18) == 1000 * 10 ** 18

    def test_initial_supply_is_exact(self):
        assert to_base_units(100_000_000_000, 18) == 100_000_000_000 * 10 ** 18

    def test_fractional_tokens(self):
        assert to_base_units("1.5", 18) == 15 * 10 ** 17
        assert to_base_units(Decimal("0.01"), 2) == 1

    def test_too_precise(self):
        with pytest.raises(InvalidAmount):
            to_base_units("0.001", 2)

    def test_not_a_number(self):
        with pytest.raises(InvalidAmount):
            to_base_units("lots", 18)

    def test_format_units(self):
        assert format_units(15 * 10 ** 17, 18) == "1.5"
        assert format_units(10 ** 18, 18) == "1"
        assert format_units(1, 18) == "0.000000000000000001"
        assert format_units(123, 0) == "123"
