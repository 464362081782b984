"""Exchange-rate formatting: ``'EUR/PLN 4,1927'`` and friends.

Rates are printed with the locale's characters and no grouping. A
formatter may scale the rate to a number of target units, so that
``0.041455`` JPY/PLN prints as ``100:4,1455`` with exponent 2; parsing
``${targetUnitCount}`` undoes that shift.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import io
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, Inexact
from enum import Enum
from typing import Protocol

from babel import Locale

from moneyfmt.diagnostics import (
    ErrorTemplate,
    ExchangeRateFormatError,
    UnsupportedOperationError,
)
from moneyfmt.locale_utils import LocaleLike, default_locale, resolve_locale
from moneyfmt.money import ExchangeRate

from .amount_style import MoneyAmountStyle
from .context import ExchangeRateParseContext, ExchangeRatePrintContext
from .printers import (
    LiteralPrinterParser,
    TextSink,
    parse_currency_code,
    parse_number,
    print_number,
)

__all__ = [
    "ExchangeRateFormatter",
    "ExchangeRateFormatterBuilder",
    "ExchangeRateParser",
    "ExchangeRatePrinter",
    "ExchangeRatePrinterParser",
    "RatePrinterParser",
]


class ExchangeRatePrinter(Protocol):
    def print(
        self, context: ExchangeRatePrintContext, sink: TextSink, rate: ExchangeRate
    ) -> None: ...


class ExchangeRateParser(Protocol):
    def parse(self, context: ExchangeRateParseContext) -> None: ...


@dataclass(frozen=True, slots=True)
class RatePrinterParser:
    """The rate as a localized number without grouping."""

    style: MoneyAmountStyle = MoneyAmountStyle.LOCALIZED_NO_GROUPING

    def print(self, context: ExchangeRatePrintContext, sink: TextSink, rate: ExchangeRate) -> None:
        print_number(self.style.localize(context.locale), sink, rate.rate)

    def parse(self, context: ExchangeRateParseContext) -> None:
        value = parse_number(context, self.style.localize(context.locale))
        if value is not None:
            context.rate = value

    def __str__(self) -> str:
        return "${rate}"


class ExchangeRatePrinterParser(Enum):
    """Source currency, target currency and target unit count components."""

    SOURCE_CURRENCY = "${source}"
    TARGET_CURRENCY = "${target}"
    TARGET_UNIT_COUNT = "${targetUnitCount}"

    def print(self, context: ExchangeRatePrintContext, sink: TextSink, rate: ExchangeRate) -> None:
        match self:
            case ExchangeRatePrinterParser.SOURCE_CURRENCY:
                sink.write(rate.source.code)
            case ExchangeRatePrinterParser.TARGET_CURRENCY:
                sink.write(rate.target.code)
            case ExchangeRatePrinterParser.TARGET_UNIT_COUNT:
                sink.write(str(10**context.target_units_exponent))

    def parse(self, context: ExchangeRateParseContext) -> None:
        match self:
            case ExchangeRatePrinterParser.SOURCE_CURRENCY:
                currency = parse_currency_code(context)
                if currency is not None:
                    context.source = currency
            case ExchangeRatePrinterParser.TARGET_CURRENCY:
                currency = parse_currency_code(context)
                if currency is not None:
                    context.target = currency
            case ExchangeRatePrinterParser.TARGET_UNIT_COUNT:
                self._parse_unit_count(context)

    @staticmethod
    def _parse_unit_count(context: ExchangeRateParseContext) -> None:
        start = context.index
        style = MoneyAmountStyle.LOCALIZED_NO_GROUPING.localize(context.locale)
        count = parse_number(context, style)
        if count is None:
            return
        # Only whole powers of ten (1, 10, 100, ...) are unit counts
        normalized = count.normalize()
        if (
            normalized.is_signed()
            or normalized.as_tuple().digits != (1,)
            or normalized.adjusted() < 0
        ):
            context.index = start
            context.set_error()
            return
        context.target_unit_count_exponent = normalized.adjusted()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ExchangeRateFormatter:
    """Formats and parses exchange rates.

    Attributes:
        printers: Printer components, in order
        parsers: Parser components, in order
        locale: Locale for the rate's characters
        scale: Decimal places for printing, or None to print the rate as-is
        rounding: decimal rounding mode used with scale; None requires exactness
        target_units_exponent: Print the rate for 10**n target units
    """

    printers: tuple[ExchangeRatePrinter | None, ...]
    parsers: tuple[ExchangeRateParser | None, ...]
    locale: Locale
    scale: int | None = None
    rounding: str | None = None
    target_units_exponent: int = 0

    def with_locale(self, locale: LocaleLike) -> ExchangeRateFormatter:
        return dataclasses.replace(self, locale=resolve_locale(locale))

    def is_printer(self) -> bool:
        return None not in self.printers

    def is_parser(self) -> bool:
        return None not in self.parsers

    def print(self, rate: ExchangeRate) -> str:
        buf = io.StringIO()
        self.print_io(buf, rate)
        return buf.getvalue()

    def print_to(self, sink: TextSink, rate: ExchangeRate) -> None:
        """Print rate to sink, wrapping sink failures in ExchangeRateFormatError."""
        try:
            self.print_io(sink, rate)
        except OSError as ex:
            raise ExchangeRateFormatError(ErrorTemplate.print_sink_failed(str(ex))) from ex

    def print_io(self, sink: TextSink, rate: ExchangeRate) -> None:
        """Print rate to sink, letting OSError from the sink propagate.

        Raises:
            ArithmeticError: If a scale is set without a rounding mode and
                the rate has more decimal places than the scale
        """
        if not isinstance(rate, ExchangeRate):
            msg = f"Rate must be an ExchangeRate, got {type(rate).__name__}"
            raise TypeError(msg)
        if not self.is_printer():
            raise UnsupportedOperationError(
                ErrorTemplate.print_unsupported("ExchangeRateFormatter")
            )
        value = rate.rate
        if self.target_units_exponent > 0:
            value = value.scaleb(self.target_units_exponent)
        if self.scale is not None:
            value = self._rescale(value, self.scale)
        context = ExchangeRatePrintContext(self.locale, self.target_units_exponent)
        printed = rate.with_rate(value)
        for printer in self.printers:
            printer.print(context, sink, printed)  # type: ignore[union-attr]

    def _rescale(self, value: Decimal, scale: int) -> Decimal:
        digits = value.as_tuple()
        exponent = digits.exponent
        assert isinstance(exponent, int)  # rates are finite
        context = Context(
            prec=max(len(digits.digits) + exponent + scale, 0) + 2,
            rounding=self.rounding or ROUND_HALF_EVEN,
        )
        if self.rounding is None:
            context.traps[Inexact] = True
        try:
            return value.quantize(Decimal(1).scaleb(-scale), context=context)
        except Inexact:
            msg = f"Rate {value:f} needs rounding to fit scale {scale}"
            raise ArithmeticError(msg) from None

    def parse(self, text: str) -> ExchangeRate:
        """Parse the whole of text strictly.

        Raises:
            ExchangeRateFormatError: If the text is malformed, has trailing
                text, or lacks the source, the target or the rate
        """
        context = self.parse_context(text, 0)
        if context.is_error():
            raise ExchangeRateFormatError(
                ErrorTemplate.parse_error_at_index(text, context.error_index)
            )
        if not context.is_fully_parsed():
            raise ExchangeRateFormatError(ErrorTemplate.parse_unparsed_text(text, context.index))
        if not context.is_complete():
            raise ExchangeRateFormatError(
                ErrorTemplate.parse_incomplete(text, "source currency, target currency and rate")
            )
        try:
            return context.to_exchange_rate()
        except ValueError as ex:
            raise ExchangeRateFormatError(str(ex)) from ex

    def parse_context(self, text: str, start_index: int = 0) -> ExchangeRateParseContext:
        """Run the parsers from start_index and return the raw context."""
        if not isinstance(text, str):
            msg = f"Text must be a str, got {type(text).__name__}"
            raise TypeError(msg)
        if not 0 <= start_index <= len(text):
            msg = f"Invalid start index: {start_index}"
            raise IndexError(msg)
        if not self.is_parser():
            raise UnsupportedOperationError(
                ErrorTemplate.parse_unsupported("ExchangeRateFormatter")
            )
        context = ExchangeRateParseContext(self.locale, text, start_index)
        for parser in self.parsers:
            parser.parse(context)  # type: ignore[union-attr]
            if context.is_error():
                break
        return context

    def __str__(self) -> str:
        return "".join(str(p) for p in self.printers)


class ExchangeRateFormatterBuilder:
    """Fluent builder for ExchangeRateFormatter.

    Example:
        >>> formatter = (
        ...     ExchangeRateFormatterBuilder()
        ...     .append_target_currency()
        ...     .append_literal("/")
        ...     .append_source_currency()
        ...     .append_literal(" ")
        ...     .append_rate()
        ...     .to_formatter("pl-PL")
        ... )
        >>> formatter.print(ExchangeRate.of("4.1927", "PLN", "EUR"))
        'EUR/PLN 4,1927'
    """

    def __init__(self) -> None:
        self._printers: list[ExchangeRatePrinter | None] = []
        self._parsers: list[ExchangeRateParser | None] = []
        self._scale: int | None = None
        self._rounding: str | None = None
        self._target_units_exponent = 0

    def append_rate(self) -> ExchangeRateFormatterBuilder:
        component = RatePrinterParser()
        return self.append(component, component)

    def append_source_currency(self) -> ExchangeRateFormatterBuilder:
        component = ExchangeRatePrinterParser.SOURCE_CURRENCY
        return self.append(component, component)

    def append_target_currency(self) -> ExchangeRateFormatterBuilder:
        component = ExchangeRatePrinterParser.TARGET_CURRENCY
        return self.append(component, component)

    def append_target_unit_count(self) -> ExchangeRateFormatterBuilder:
        """Append 10**n, where n is the target-units exponent."""
        component = ExchangeRatePrinterParser.TARGET_UNIT_COUNT
        return self.append(component, component)

    def append_literal(self, literal: str | None) -> ExchangeRateFormatterBuilder:
        """Append fixed text; None and the empty string are ignored."""
        if not literal:
            return self
        component = LiteralPrinterParser(str(literal))
        return self.append(component, component)

    def append(
        self, printer: ExchangeRatePrinter | None, parser: ExchangeRateParser | None
    ) -> ExchangeRateFormatterBuilder:
        self._printers.append(printer)
        self._parsers.append(parser)
        return self

    def set_scale(self, scale: int, rounding: str | None = None) -> ExchangeRateFormatterBuilder:
        """Print rates with exactly scale decimal places.

        Args:
            scale: Decimal places, >= 0
            rounding: decimal rounding mode; None raises ArithmeticError at
                print time when digits would be lost

        Raises:
            ValueError: If scale is negative
        """
        if scale < 0:
            msg = f"Scale must be greater or equal to 0, got {scale}"
            raise ValueError(msg)
        self._scale = scale
        self._rounding = rounding
        return self

    def set_target_units_exponent(self, exponent: int) -> ExchangeRateFormatterBuilder:
        """Print rates for 10**exponent target units.

        Raises:
            ValueError: If exponent is negative
        """
        if exponent < 0:
            msg = f"Target units exponent must be greater or equal to 0, got {exponent}"
            raise ValueError(msg)
        self._target_units_exponent = exponent
        return self

    def to_formatter(self, locale: LocaleLike | None = None) -> ExchangeRateFormatter:
        resolved = default_locale() if locale is None else resolve_locale(locale)
        return ExchangeRateFormatter(
            tuple(self._printers),
            tuple(self._parsers),
            resolved,
            self._scale,
            self._rounding,
            self._target_units_exponent,
        )
