"""Immutable exchange rate between two currencies.

An ExchangeRate states how many units of the source currency buy one unit
of the target currency: ``1 target = rate source``. Only the value is
modelled here; converting amounts is out of scope.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .currency import CurrencyUnit

__all__ = ["ExchangeRate"]

_PARSE_RE = re.compile(r"1\s+([A-Z]{3})\s+=\s+([-+]?\d+(?:\.\d+)?)\s+([A-Z]{3})")


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """Rate between a source and a target currency.

    Equality compares rates numerically, so 1.50 and 1.5 are equal.

    Attributes:
        rate: Units of source currency per unit of target currency, > 0
        source: Currency the rate is expressed in
        target: Currency being priced
    """

    rate: Decimal
    source: CurrencyUnit
    target: CurrencyUnit

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Decimal):
            msg = f"Rate must be a Decimal, got {type(self.rate).__name__}"
            raise TypeError(msg)
        if not isinstance(self.source, CurrencyUnit) or not isinstance(self.target, CurrencyUnit):
            msg = "Source and target currencies must be CurrencyUnit instances"
            raise TypeError(msg)
        if not self.rate.is_finite() or self.rate <= 0:
            msg = f"Rate must be greater than 0, got {self.rate}"
            raise ValueError(msg)
        if self.source == self.target and self.rate != 1:
            msg = (
                "Rate must be 1 if source and target currencies are the same, "
                f"got rate={self.rate}, source={self.source}, target={self.target}"
            )
            raise ValueError(msg)

    @classmethod
    def of(
        cls,
        rate: Decimal | int | str,
        source: CurrencyUnit | str,
        target: CurrencyUnit | str,
    ) -> ExchangeRate:
        """Create from a rate and two currencies (units or codes)."""
        if isinstance(rate, (int, str)) and not isinstance(rate, bool):
            try:
                rate = Decimal(rate)
            except InvalidOperation:
                msg = f"Rate '{rate}' is not a valid decimal number"
                raise ValueError(msg) from None
        if isinstance(source, str):
            source = CurrencyUnit.of(source)
        if isinstance(target, str):
            target = CurrencyUnit.of(target)
        return cls(rate, source, target)

    @classmethod
    def identity(cls, currency: CurrencyUnit) -> ExchangeRate:
        return cls(Decimal(1), currency, currency)

    @classmethod
    def parse(cls, text: str) -> ExchangeRate:
        """Parse the canonical form '1 EUR = 4.1927 PLN'.

        Raises:
            ValueError: If the text is not in canonical form
            IllegalCurrencyError: If either currency code is unknown
        """
        match = _PARSE_RE.fullmatch(text.strip())
        if match is None:
            msg = f"Exchange rate '{text}' cannot be parsed"
            raise ValueError(msg)
        target, rate, source = match.groups()
        return cls.of(rate, source, target)

    def with_rate(self, rate: Decimal) -> ExchangeRate:
        return ExchangeRate(rate, self.source, self.target)

    def __str__(self) -> str:
        return f"1 {self.target} = {self.rate:f} {self.source}"
