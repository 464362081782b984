"""MoneyFormatter - public entry point for printing and parsing money.

A formatter is an immutable pairing of a printer/parser chain with a
locale. It is safe to share between threads; every call builds its own
context.

Examples:
    >>> from moneyfmt import MoneyFormatterBuilder, Money
    >>> f = MoneyFormatterBuilder().append_currency_code().append_literal(" ").append_amount()
    >>> f = f.to_formatter("en-GB")
    >>> f.print(Money.of("GBP", "1234.5"))
    'GBP 1,234.50'
    >>> str(f.parse_big_money("GBP 1,234.50"))
    'GBP 1234.50'

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import io
from dataclasses import dataclass

from babel import Locale

from moneyfmt.diagnostics import (
    ErrorTemplate,
    IncompleteParseError,
    MoneyFormatError,
    MoneyParseError,
    UnparsedTextError,
    UnsupportedOperationError,
)
from moneyfmt.locale_utils import LocaleLike, resolve_locale
from moneyfmt.money import BigMoney, BigMoneyProvider, Money

from .composite import MultiPrinterParser
from .context import MoneyParseContext, MoneyPrintContext
from .printers import TextSink

__all__ = ["MoneyFormatter"]


@dataclass(frozen=True, slots=True)
class MoneyFormatter:
    """Formats and parses monetary values.

    Obtain instances from ``MoneyFormatterBuilder.to_formatter()``.

    Attributes:
        printer_parser: The component chain
        locale: Locale used for localized styles and symbols
    """

    printer_parser: MultiPrinterParser
    locale: Locale

    def with_locale(self, locale: LocaleLike) -> MoneyFormatter:
        """Copy of this formatter bound to another locale."""
        return dataclasses.replace(self, locale=resolve_locale(locale))

    def is_printer(self) -> bool:
        return self.printer_parser.is_printer()

    def is_parser(self) -> bool:
        return self.printer_parser.is_parser()

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print(self, money: BigMoneyProvider) -> str:
        """Print money to a new string.

        Raises:
            TypeError: If money is None or not a monetary value
            UnsupportedOperationError: If the chain cannot print
        """
        buf = io.StringIO()
        self.print_io(buf, money)
        return buf.getvalue()

    def print_to(self, sink: TextSink, money: BigMoneyProvider) -> None:
        """Print money to sink, wrapping sink failures.

        Raises:
            MoneyFormatError: If the sink raised OSError (chained as __cause__)
            UnsupportedOperationError: If the chain cannot print
        """
        try:
            self.print_io(sink, money)
        except OSError as ex:
            raise MoneyFormatError(ErrorTemplate.print_sink_failed(str(ex))) from ex

    def print_io(self, sink: TextSink, money: BigMoneyProvider) -> None:
        """Print money to sink, letting OSError from the sink propagate."""
        if not isinstance(money, BigMoneyProvider):
            msg = f"Money must be a BigMoney or Money, got {type(money).__name__}"
            raise TypeError(msg)
        if not self.is_printer():
            raise UnsupportedOperationError(ErrorTemplate.print_unsupported("MoneyFormatter"))
        context = MoneyPrintContext(self.locale)
        self.printer_parser.print(context, sink, money.to_big_money())

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str, start_index: int = 0) -> MoneyParseContext:
        """Run the chain from start_index and return the raw context.

        Completeness is not checked; inspect the returned context.

        Raises:
            TypeError: If text is not a str
            IndexError: If start_index is outside 0..len(text)
            UnsupportedOperationError: If the chain cannot parse
        """
        if not isinstance(text, str):
            msg = f"Text must be a str, got {type(text).__name__}"
            raise TypeError(msg)
        if not 0 <= start_index <= len(text):
            msg = f"Invalid start index: {start_index}"
            raise IndexError(msg)
        if not self.is_parser():
            raise UnsupportedOperationError(ErrorTemplate.parse_unsupported("MoneyFormatter"))
        context = MoneyParseContext(self.locale, text, start_index)
        self.printer_parser.parse(context)
        return context

    def parse_big_money(self, text: str) -> BigMoney:
        """Parse the whole of text strictly.

        Raises:
            MoneyParseError: If a component failed at some index
            UnparsedTextError: If text remains after the chain finished
            IncompleteParseError: If the currency or the amount was not found
        """
        context = self.parse(text, 0)
        if context.is_error():
            raise MoneyParseError(
                ErrorTemplate.parse_error_at_index(text, context.error_index),
                text=text,
                index=context.error_index,
            )
        if not context.is_fully_parsed():
            raise UnparsedTextError(
                ErrorTemplate.parse_unparsed_text(text, context.index),
                text=text,
                index=context.index,
            )
        if not context.is_complete():
            raise IncompleteParseError(
                ErrorTemplate.parse_incomplete(text, "both currency and amount"),
                text=text,
                index=context.index,
            )
        return context.to_big_money()

    def parse_money(self, text: str) -> Money:
        """Parse strictly, then fit the amount to the currency's scale.

        Raises:
            ArithmeticError: If the amount has more decimal places than the currency
        """
        return self.parse_big_money(text).to_money()

    def __str__(self) -> str:
        return str(self.printer_parser)
