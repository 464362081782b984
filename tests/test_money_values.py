"""Tests for the value types: CurrencyUnit, BigMoney, Money and ExchangeRate.

Python 3.13+.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pytest
from hypothesis import event, given

from moneyfmt.constants import PSEUDO_CURRENCY_DECIMALS
from moneyfmt.diagnostics import CurrencyMismatchError, IllegalCurrencyError
from moneyfmt.money import BigMoney, BigMoneyProvider, CurrencyUnit, ExchangeRate, Money
from tests.strategies import big_money_values

GBP = CurrencyUnit.of("GBP")
USD = CurrencyUnit.of("USD")
JPY = CurrencyUnit.of("JPY")


# ============================================================================
# CurrencyUnit
# ============================================================================


class TestCurrencyUnit:
    """Registry lookups and currency properties."""

    def test_of_returns_registered_unit(self) -> None:
        """Known codes resolve with their numeric code and decimal places."""
        assert GBP.code == "GBP"
        assert GBP.numeric_code == 826
        assert GBP.decimal_places == 2
        assert JPY.decimal_places == 0

    def test_of_is_case_sensitive(self) -> None:
        """Lower-case codes are unknown."""
        with pytest.raises(IllegalCurrencyError, match="Unknown currency 'gbp'"):
            CurrencyUnit.of("gbp")

    def test_of_unknown_code(self) -> None:
        """Unknown codes raise IllegalCurrencyError, a ValueError."""
        with pytest.raises(ValueError, match="GBX"):
            CurrencyUnit.of("GBX")

    def test_of_non_string(self) -> None:
        """Non-string codes raise TypeError."""
        with pytest.raises(TypeError):
            CurrencyUnit.of(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", ["8", "08", "008", 8])
    def test_of_numeric_code_padding(self, code: str | int) -> None:
        """Numeric lookups accept codes with or without leading zeros."""
        assert CurrencyUnit.of_numeric_code(code).code == "ALL"

    @pytest.mark.parametrize("code", ["", "0008", "8a", "001", "-8"])
    def test_of_numeric_code_invalid(self, code: str) -> None:
        """Malformed or unknown numeric codes raise IllegalCurrencyError."""
        with pytest.raises(IllegalCurrencyError):
            CurrencyUnit.of_numeric_code(code)

    def test_numeric3_code(self) -> None:
        """numeric3_code is zero-padded to three digits."""
        assert CurrencyUnit.of("ALL").numeric3_code == "008"
        assert GBP.numeric3_code == "826"

    def test_pseudo_currency(self) -> None:
        """Pseudo-currencies have no minor unit."""
        gold = CurrencyUnit.of("XAU")
        assert gold.is_pseudo_currency
        assert gold.decimal_places == 0
        assert not GBP.is_pseudo_currency
        assert gold.raw_decimal_places == PSEUDO_CURRENCY_DECIMALS
        assert GBP.raw_decimal_places == 2

    def test_registered_currencies_sorted(self) -> None:
        """The registry lists currencies in code order."""
        codes = [unit.code for unit in CurrencyUnit.registered_currencies()]
        assert codes == sorted(codes)
        assert {"GBP", "EUR", "USD", "JPY"} <= set(codes)

    def test_symbol(self) -> None:
        """Symbols come from CLDR for the given locale."""
        assert GBP.get_symbol("en-GB") == "£"
        assert USD.get_symbol("en-US") == "$"

    def test_str(self) -> None:
        """str() is the alphabetic code."""
        assert str(GBP) == "GBP"


# ============================================================================
# BigMoney / Money
# ============================================================================


class TestBigMoney:
    """Arbitrary-scale monetary values."""

    def test_of_keeps_scale(self) -> None:
        """The amount's scale is preserved."""
        money = BigMoney.of("GBP", "12.345")
        assert money.amount == Decimal("12.345")
        assert money.scale == 3

    def test_of_int_and_float(self) -> None:
        """Integers and floats are converted without binary noise."""
        assert BigMoney.of(GBP, 12).amount == Decimal(12)
        assert BigMoney.of(GBP, 0.1).amount == Decimal("0.1")

    def test_negative_zero_normalized(self) -> None:
        """-0 is stored as 0."""
        money = BigMoney.of(GBP, Decimal("-0.00"))
        assert not money.amount.is_signed()
        assert money.is_zero()

    def test_rejects_non_finite(self) -> None:
        """NaN and infinities are rejected."""
        with pytest.raises(ValueError, match="finite"):
            BigMoney.of(GBP, Decimal("NaN"))

    def test_rejects_bool(self) -> None:
        """Booleans are not amounts."""
        with pytest.raises(TypeError):
            BigMoney.of(GBP, True)

    def test_sign_predicates(self) -> None:
        """Sign predicates classify zero separately."""
        assert BigMoney.of(GBP, 5).is_positive()
        assert BigMoney.of(GBP, -5).is_negative()
        zero = BigMoney.of(GBP, 0)
        assert zero.is_zero()
        assert not zero.is_positive()
        assert not zero.is_negative()

    def test_negated_and_abs(self) -> None:
        """negated() flips the sign and abs() drops it."""
        money = BigMoney.of(GBP, "-12.30")
        assert money.negated().amount == Decimal("12.30")
        assert money.abs() == money.negated()
        assert money.negated().abs() == money.negated()

    def test_with_amount_identity(self) -> None:
        """Setting an identical amount returns the same instance."""
        money = BigMoney.of(GBP, "1.50")
        assert money.with_amount(Decimal("1.50")) is money
        assert money.with_amount(Decimal("1.5")) is not money

    def test_parse_canonical(self) -> None:
        """Canonical text parses into currency and amount."""
        money = BigMoney.parse("GBP 12.34")
        assert money.currency == GBP
        assert money.amount == Decimal("12.34")
        assert BigMoney.parse("USD-1.5").amount == Decimal("-1.5")

    @pytest.mark.parametrize("text", ["GBP", "GBP abc", "GBP .", "GBP 1,000"])
    def test_parse_invalid(self, text: str) -> None:
        """Non-canonical text is rejected."""
        with pytest.raises(ValueError):
            BigMoney.parse(text)

    def test_check_currency_equal(self) -> None:
        """Mismatched currencies raise CurrencyMismatchError."""
        with pytest.raises(CurrencyMismatchError, match="GBP/USD"):
            BigMoney.of(GBP, 1).check_currency_equal(BigMoney.of(USD, 1))

    def test_provider_protocol(self) -> None:
        """Money and BigMoney are both BigMoney providers."""
        assert isinstance(BigMoney.of(GBP, 1), BigMoneyProvider)
        assert isinstance(Money.of(GBP, 1), BigMoneyProvider)

    @given(money=big_money_values())
    def test_str_parse_round_trip(self, money: BigMoney) -> None:
        """Property: BigMoney.parse(str(money)) == money."""
        event(f"negative={money.is_negative()}")
        assert BigMoney.parse(str(money)) == money


class TestMoney:
    """Currency-scale monetary values."""

    def test_of_pads_to_currency_scale(self) -> None:
        """Amounts are stored at the currency's decimal places."""
        assert str(Money.of(GBP, "12.3")) == "GBP 12.30"
        assert str(Money.of(JPY, 12)) == "JPY 12"

    def test_of_requires_exact_fit(self) -> None:
        """Extra decimal places raise ArithmeticError without a rounding mode."""
        with pytest.raises(ArithmeticError, match="greater than the scale"):
            Money.of(GBP, "12.345")

    def test_of_with_rounding(self) -> None:
        """A rounding mode allows lossy conversion."""
        assert Money.of(GBP, "12.345", ROUND_HALF_UP).amount == Decimal("12.35")

    def test_to_money_from_big_money(self) -> None:
        """BigMoney converts to Money at the currency scale."""
        assert BigMoney.of(GBP, "12.300").to_money().amount == Decimal("12.30")

    def test_to_big_money(self) -> None:
        """Money converts back to BigMoney at the same scale."""
        assert Money.of(GBP, 1).to_big_money().scale == 2


# ============================================================================
# ExchangeRate
# ============================================================================


class TestExchangeRate:
    """Exchange-rate value type."""

    def test_of_codes(self) -> None:
        """Currencies may be given as codes."""
        rate = ExchangeRate.of("4.1927", "PLN", "EUR")
        assert rate.rate == Decimal("4.1927")
        assert rate.source.code == "PLN"
        assert rate.target.code == "EUR"

    @pytest.mark.parametrize("value", ["0", "-1.5"])
    def test_rate_must_be_positive(self, value: str) -> None:
        """Zero and negative rates are rejected."""
        with pytest.raises(ValueError, match="greater than 0"):
            ExchangeRate.of(value, "PLN", "EUR")

    def test_same_currency_requires_unit_rate(self) -> None:
        """A currency converts to itself only at rate 1."""
        with pytest.raises(ValueError, match="Rate must be 1"):
            ExchangeRate.of("1.1", "EUR", "EUR")
        assert ExchangeRate.identity(GBP).rate == 1

    def test_numeric_equality(self) -> None:
        """Rates compare numerically."""
        assert ExchangeRate.of("1.50", "USD", "GBP") == ExchangeRate.of("1.5", "USD", "GBP")

    def test_parse_and_str(self) -> None:
        """Canonical form is '1 target = rate source'."""
        rate = ExchangeRate.parse("1 GBP = 1.2 USD")
        assert rate.target == GBP
        assert rate.source == USD
        assert rate.rate == Decimal("1.2")
        assert str(rate) == "1 GBP = 1.2 USD"

    def test_parse_extra_whitespace(self) -> None:
        """Runs of whitespace are accepted between every part."""
        rate = ExchangeRate.parse("1  GBP  =  1.2  USD")
        assert rate == ExchangeRate.of("1.2", "USD", "GBP")

    def test_parse_invalid(self) -> None:
        """Malformed text is rejected."""
        with pytest.raises(ValueError, match="cannot be parsed"):
            ExchangeRate.parse("GBP/USD 1.2")
