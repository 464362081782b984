"""MoneyFormatterBuilder - fluent construction of money formatters.

The builder collects printer/parser pairs in order. ``to_formatter()``
snapshots them into an immutable chain, so one builder can produce many
formatters and later appends never affect formatters already built.

Python 3.13+.
"""

from __future__ import annotations

from babel import Locale

from moneyfmt.locale_utils import LocaleLike, default_locale, resolve_locale

from .amount_style import MoneyAmountStyle
from .composite import MultiPrinterParser, SignedPrinterParser
from .formatter import MoneyFormatter
from .printers import (
    AmountPrinterParser,
    CurrencyPrinterParser,
    LiteralPrinterParser,
    LocalizedSymbolPrinter,
    MoneyParser,
    MoneyPrinter,
)

__all__ = ["MoneyFormatterBuilder"]


class MoneyFormatterBuilder:
    """Fluent builder for MoneyFormatter.

    Every ``append_*`` method returns the builder itself.

    Example:
        >>> formatter = (
        ...     MoneyFormatterBuilder()
        ...     .append_currency_code()
        ...     .append_literal(" ")
        ...     .append_amount_localized()
        ...     .to_formatter("de-DE")
        ... )
        >>> str(formatter)
        "${code}' '${amount}"
    """

    def __init__(self) -> None:
        self._printers: list[MoneyPrinter | None] = []
        self._parsers: list[MoneyParser | None] = []

    # ------------------------------------------------------------------
    # Amount
    # ------------------------------------------------------------------

    def append_amount(self, style: MoneyAmountStyle | None = None) -> MoneyFormatterBuilder:
        """Append the amount using style (ASCII, decimal point, comma groups of 3 by default).

        Raises:
            TypeError: If style is not a MoneyAmountStyle
        """
        if style is None:
            style = MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
        elif not isinstance(style, MoneyAmountStyle):
            msg = f"style must be a MoneyAmountStyle, got {type(style).__name__}"
            raise TypeError(msg)
        component = AmountPrinterParser(style)
        return self._append_internal(component, component)

    def append_amount_localized(self) -> MoneyFormatterBuilder:
        """Append the amount using the formatter locale's characters and grouping."""
        return self.append_amount(MoneyAmountStyle.LOCALIZED_GROUPING)

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    def append_currency_code(self) -> MoneyFormatterBuilder:
        """Append the three-letter code, such as 'GBP'."""
        return self._append_internal(CurrencyPrinterParser.CODE, CurrencyPrinterParser.CODE)

    def append_currency_numeric3_code(self) -> MoneyFormatterBuilder:
        """Append the zero-padded numeric code, such as '008'."""
        return self._append_internal(
            CurrencyPrinterParser.NUMERIC_3_CODE, CurrencyPrinterParser.NUMERIC_3_CODE
        )

    def append_currency_numeric_code(self) -> MoneyFormatterBuilder:
        """Append the numeric code without padding, such as '8'."""
        return self._append_internal(
            CurrencyPrinterParser.NUMERIC_CODE, CurrencyPrinterParser.NUMERIC_CODE
        )

    def append_currency_symbol_localized(self) -> MoneyFormatterBuilder:
        """Append the locale's symbol, such as '£'. Print only."""
        return self._append_internal(LocalizedSymbolPrinter(), None)

    # ------------------------------------------------------------------
    # Other components
    # ------------------------------------------------------------------

    def append_literal(self, literal: str | None) -> MoneyFormatterBuilder:
        """Append fixed text; None and the empty string are ignored."""
        if not literal:
            return self
        component = LiteralPrinterParser(str(literal))
        return self._append_internal(component, component)

    def append_formatter(self, formatter: MoneyFormatter) -> MoneyFormatterBuilder:
        """Append every component of an existing formatter."""
        if formatter is None:
            msg = "formatter must not be None"
            raise TypeError(msg)
        formatter.printer_parser.append_to(self)
        return self

    def append(
        self, printer: MoneyPrinter | None, parser: MoneyParser | None
    ) -> MoneyFormatterBuilder:
        """Append a custom printer and parser; either may be None."""
        return self._append_internal(printer, parser)

    def append_signed(
        self,
        when_positive: MoneyFormatter,
        when_zero: MoneyFormatter,
        when_negative: MoneyFormatter | None = None,
    ) -> MoneyFormatterBuilder:
        """Append a component choosing a formatter by the sign of the value.

        Called with two formatters, the first handles positive and zero
        values and the second handles negative values.

        The component prints only if every formatter can print, and
        parses only if every formatter can parse.

        Raises:
            TypeError: If a formatter is None
        """
        if when_negative is None:
            when_negative = when_zero
            when_zero = when_positive
        for name, value in (
            ("when_positive", when_positive),
            ("when_zero", when_zero),
            ("when_negative", when_negative),
        ):
            if not isinstance(value, MoneyFormatter):
                msg = f"{name} must be a MoneyFormatter, got {type(value).__name__}"
                raise TypeError(msg)
        formatters = (when_positive, when_zero, when_negative)
        component = SignedPrinterParser(when_positive, when_zero, when_negative)
        printer = component if all(f.is_printer() for f in formatters) else None
        parser = component if all(f.is_parser() for f in formatters) else None
        return self._append_internal(printer, parser)

    def _append_internal(
        self, printer: MoneyPrinter | None, parser: MoneyParser | None
    ) -> MoneyFormatterBuilder:
        self._printers.append(printer)
        self._parsers.append(parser)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def to_formatter(self, locale: LocaleLike | None = None) -> MoneyFormatter:
        """Build a formatter from the components appended so far.

        Args:
            locale: Locale for localized components; None uses the
                system locale (falling back to en_US)

        Raises:
            TypeError: If locale is not a babel.Locale or str
            ValueError: If the locale code is unknown
        """
        resolved: Locale = default_locale() if locale is None else resolve_locale(locale)
        chain = MultiPrinterParser(tuple(self._printers), tuple(self._parsers))
        return MoneyFormatter(chain, resolved)
