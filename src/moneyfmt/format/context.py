"""Per-operation print and parse contexts.

A context is created for every print or parse call and is never shared
between threads. Parse contexts carry the cursor, the error marker and the
values accumulated so far; components advance the cursor or mark the
context as errored instead of raising.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple

from babel import Locale

from moneyfmt.constants import UNSET_ERROR_INDEX
from moneyfmt.diagnostics import ErrorTemplate, ExchangeRateFormatError, MoneyFormatError
from moneyfmt.money import BigMoney, CurrencyUnit, ExchangeRate

__all__ = [
    "ExchangeRateParseContext",
    "ExchangeRatePrintContext",
    "MoneyParseContext",
    "MoneyPrintContext",
    "ParseContext",
    "ParsePosition",
]


class ParsePosition(NamedTuple):
    """Snapshot of a parse: cursor index and error index (-1 if none)."""

    index: int
    error_index: int


class MoneyPrintContext:
    """Context used when printing a monetary value."""

    __slots__ = ("_locale",)

    def __init__(self, locale: Locale) -> None:
        self._locale = locale

    @property
    def locale(self) -> Locale:
        return self._locale

    @locale.setter
    def locale(self, locale: Locale) -> None:
        if locale is None:
            msg = "Locale must not be None"
            raise TypeError(msg)
        self._locale = locale


class ExchangeRatePrintContext(MoneyPrintContext):
    """Print context that also knows the target-units exponent."""

    __slots__ = ("target_units_exponent",)

    def __init__(self, locale: Locale, target_units_exponent: int = 0) -> None:
        super().__init__(locale)
        self.target_units_exponent = target_units_exponent


class ParseContext:
    """Text, cursor and error state shared by every parse context."""

    __slots__ = ("_error_index", "_index", "_text", "locale")

    def __init__(self, locale: Locale, text: str, index: int) -> None:
        self.locale = locale
        self._text = text
        self._index = index
        self._error_index = UNSET_ERROR_INDEX

    @property
    def text(self) -> str:
        return self._text

    @property
    def text_length(self) -> int:
        return len(self._text)

    def get_text_substring(self, start: int, end: int) -> str:
        """Text between start (inclusive) and end (exclusive).

        Raises:
            IndexError: If the range lies outside the text
        """
        if not 0 <= start <= end <= len(self._text):
            msg = f"Invalid substring range {start}:{end} for text of length {len(self._text)}"
            raise IndexError(msg)
        return self._text[start:end]

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, index: int) -> None:
        self._index = index

    @property
    def error_index(self) -> int:
        return self._error_index

    @error_index.setter
    def error_index(self, index: int) -> None:
        self._error_index = index

    def set_error(self) -> None:
        """Mark the context as errored at the current index."""
        self._error_index = self._index

    def is_error(self) -> bool:
        return self._error_index >= 0

    def is_fully_parsed(self) -> bool:
        return self._index == len(self._text)

    def to_parse_position(self) -> ParsePosition:
        return ParsePosition(self._index, self._error_index)


class MoneyParseContext(ParseContext):
    """Mutable state of one money parse.

    ``is_error()``, ``is_fully_parsed()`` and ``is_complete()`` are
    independent; strict callers check all three.

    Attributes:
        currency: Currency parsed so far, or None
        amount: Amount parsed so far, or None
    """

    __slots__ = ("amount", "currency")

    def __init__(
        self,
        locale: Locale,
        text: str,
        index: int,
        currency: CurrencyUnit | None = None,
        amount: Decimal | None = None,
    ) -> None:
        super().__init__(locale, text, index)
        self.currency = currency
        self.amount = amount

    def is_complete(self) -> bool:
        """True when both a currency and an amount have been parsed."""
        return self.currency is not None and self.amount is not None

    def create_child(self) -> MoneyParseContext:
        """Independent copy for trial parsing, starting at this cursor."""
        child = MoneyParseContext(self.locale, self._text, self._index, self.currency, self.amount)
        child.error_index = self._error_index
        return child

    def merge_child(self, child: MoneyParseContext) -> None:
        """Adopt the state of a winning child context."""
        self.locale = child.locale
        self._text = child.text
        self._index = child.index
        self._error_index = child.error_index
        self.currency = child.currency
        self.amount = child.amount

    def to_big_money(self) -> BigMoney:
        """Build a BigMoney from the parsed currency and amount.

        Raises:
            MoneyFormatError: If the currency or the amount is missing
        """
        if self.currency is None:
            raise MoneyFormatError(ErrorTemplate.parse_missing_component("BigMoney", "currency"))
        if self.amount is None:
            raise MoneyFormatError(ErrorTemplate.parse_missing_component("BigMoney", "amount"))
        return BigMoney.of(self.currency, self.amount)


class ExchangeRateParseContext(ParseContext):
    """Mutable state of one exchange-rate parse.

    Attributes:
        source: Source currency parsed so far, or None
        target: Target currency parsed so far, or None
        rate: Rate parsed so far, or None
        target_unit_count_exponent: Power of ten read by ${targetUnitCount}
    """

    __slots__ = ("rate", "source", "target", "target_unit_count_exponent")

    def __init__(self, locale: Locale, text: str, index: int) -> None:
        super().__init__(locale, text, index)
        self.source: CurrencyUnit | None = None
        self.target: CurrencyUnit | None = None
        self.rate: Decimal | None = None
        self.target_unit_count_exponent = 0

    def is_complete(self) -> bool:
        """True when source, target and rate have all been parsed."""
        return self.source is not None and self.target is not None and self.rate is not None

    def to_exchange_rate(self) -> ExchangeRate:
        """Build an ExchangeRate, undoing the target-unit-count shift.

        Raises:
            ExchangeRateFormatError: If a component is missing
        """
        if self.target is None:
            raise ExchangeRateFormatError(
                ErrorTemplate.parse_missing_component("ExchangeRate", "target currency")
            )
        if self.source is None:
            raise ExchangeRateFormatError(
                ErrorTemplate.parse_missing_component("ExchangeRate", "source currency")
            )
        if self.rate is None:
            raise ExchangeRateFormatError(
                ErrorTemplate.parse_missing_component("ExchangeRate", "rate")
            )
        rate = self.rate.scaleb(-self.target_unit_count_exponent)
        return ExchangeRate(rate, self.source, self.target)
