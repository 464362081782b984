"""Immutable monetary values: BigMoney (any scale) and Money (currency scale).

These are thin amount-plus-currency holders consumed by the format package.
The formatter only reads the amount, currency and sign class when printing,
and builds a fresh BigMoney from a parse context.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import Protocol, TypeAlias, runtime_checkable

from moneyfmt.constants import ISO_CURRENCY_CODE_LENGTH
from moneyfmt.diagnostics import CurrencyMismatchError, ErrorTemplate

from .currency import CurrencyUnit

__all__ = ["BigMoney", "BigMoneyProvider", "Money"]

AmountLike: TypeAlias = Decimal | int | float | str

# Amount part accepted by BigMoney.parse(); a digit must also be present.
_PARSE_AMOUNT_RE = re.compile(r"[+-]?[0-9]*\.?[0-9]*")


@runtime_checkable
class BigMoneyProvider(Protocol):
    """Anything that can present itself as a BigMoney (Money, BigMoney)."""

    def to_big_money(self) -> BigMoney:
        """Convert to an arbitrary-scale monetary value."""
        ...


def _to_currency(currency: CurrencyUnit | str) -> CurrencyUnit:
    if isinstance(currency, CurrencyUnit):
        return currency
    return CurrencyUnit.of(currency)


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        msg = "Amount must be a Decimal, int, float or str, got bool"
        raise TypeError(msg)
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        # Shortest repr, so 0.1 becomes Decimal('0.1') rather than the binary expansion
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount)
        except InvalidOperation:
            msg = f"Amount '{amount}' is not a valid decimal number"
            raise ValueError(msg) from None
    else:
        msg = f"Amount must be a Decimal, int, float or str, got {type(amount).__name__}"
        raise TypeError(msg)
    if not value.is_finite():
        msg = f"Amount must be finite, got {value}"
        raise ValueError(msg)
    if value.is_zero() and value.is_signed():
        value = value.copy_abs()
    return value


@dataclass(frozen=True, slots=True)
class BigMoney:
    """An amount in a currency, with no restriction on the amount's scale.

    Attributes:
        currency: The currency unit
        amount: The amount, any scale; negative zero is normalized to zero
    """

    currency: CurrencyUnit
    amount: Decimal

    @classmethod
    def of(cls, currency: CurrencyUnit | str, amount: AmountLike) -> BigMoney:
        """Create from a currency (unit or code) and an amount.

        Raises:
            IllegalCurrencyError: If a currency code is unknown
            TypeError: If amount has an unsupported type
            ValueError: If amount is not a finite number
        """
        return cls(_to_currency(currency), _to_decimal(amount))

    @classmethod
    def parse(cls, text: str) -> BigMoney:
        """Parse the canonical form '<CODE> <amount>', e.g. 'GBP 12.34'.

        Spaces between the code and the amount are optional.

        Raises:
            ValueError: If the text is not in canonical form
            IllegalCurrencyError: If the currency code is unknown
        """
        if not isinstance(text, str):
            msg = f"Money text must be a str, got {type(text).__name__}"
            raise TypeError(msg)
        if len(text) <= ISO_CURRENCY_CODE_LENGTH:
            msg = f"Money '{text}' cannot be parsed"
            raise ValueError(msg)
        currency = CurrencyUnit.of(text[:ISO_CURRENCY_CODE_LENGTH])
        amount_text = text[ISO_CURRENCY_CODE_LENGTH:].lstrip(" ")
        if not _PARSE_AMOUNT_RE.fullmatch(amount_text) or not any(
            ch.isdigit() for ch in amount_text
        ):
            msg = f"Money amount '{text}' cannot be parsed"
            raise ValueError(msg)
        return cls(currency, _to_decimal(amount_text))

    @property
    def scale(self) -> int:
        """Number of digits after the decimal point (negative for 1E+3 forms)."""
        exponent = self.amount.as_tuple().exponent
        assert isinstance(exponent, int)  # finite by construction
        return -exponent

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self.currency == other.to_big_money().currency

    def negated(self) -> BigMoney:
        if self.is_zero():
            return self
        return BigMoney(self.currency, -self.amount)

    def abs(self) -> BigMoney:
        return self.negated() if self.is_negative() else self

    def with_amount(self, amount: AmountLike) -> BigMoney:
        value = _to_decimal(amount)
        if value.compare_total(self.amount) == 0:
            return self
        return BigMoney(self.currency, value)

    def check_currency_equal(self, other: BigMoneyProvider) -> None:
        """Raise CurrencyMismatchError unless other uses the same currency."""
        other_currency = other.to_big_money().currency
        if other_currency != self.currency:
            raise CurrencyMismatchError(
                ErrorTemplate.currency_mismatch(self.currency.code, other_currency.code)
            )

    def to_big_money(self) -> BigMoney:
        return self

    def to_money(self, rounding: str | None = None) -> Money:
        """Convert to the currency's scale.

        Args:
            rounding: decimal rounding mode (e.g., decimal.ROUND_HALF_UP);
                None requires the conversion to be exact

        Raises:
            ArithmeticError: If rounding is None and digits would be lost
        """
        return Money.of(self.currency, self.amount, rounding)

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:f}"


@dataclass(frozen=True, slots=True)
class Money:
    """An amount in a currency, held at the currency's decimal places.

    Attributes:
        currency: The currency unit
        amount: The amount, always at ``currency.decimal_places`` scale
    """

    currency: CurrencyUnit
    amount: Decimal

    @classmethod
    def of(
        cls,
        currency: CurrencyUnit | str,
        amount: AmountLike,
        rounding: str | None = None,
    ) -> Money:
        """Create at the currency's scale.

        Args:
            currency: Currency unit or code
            amount: Amount of any scale
            rounding: decimal rounding mode; None requires an exact fit

        Raises:
            ArithmeticError: If rounding is None and the amount has more
                decimal places than the currency allows
        """
        unit = _to_currency(currency)
        value = _to_decimal(amount)
        places = unit.decimal_places
        digits = value.as_tuple()
        exponent = digits.exponent
        assert isinstance(exponent, int)  # finite by construction
        context = Context(prec=max(len(digits.digits) + exponent + places, 0) + 2)
        scaled = value.quantize(
            Decimal(1).scaleb(-places),
            rounding=rounding or ROUND_HALF_EVEN,
            context=context,
        )
        if rounding is None and scaled != value:
            msg = (
                f"Scale of amount {value:f} is greater than the scale "
                f"of the currency {unit.code}"
            )
            raise ArithmeticError(msg)
        if scaled.is_zero() and scaled.is_signed():
            scaled = scaled.copy_abs()
        return cls(unit, scaled)

    @classmethod
    def parse(cls, text: str) -> Money:
        """Parse the canonical form '<CODE> <amount>' at currency scale."""
        return BigMoney.parse(text).to_money()

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def negated(self) -> Money:
        if self.is_zero():
            return self
        return Money(self.currency, -self.amount)

    def to_big_money(self) -> BigMoney:
        return BigMoney(self.currency, self.amount)

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:f}"
