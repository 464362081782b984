"""Composite printer/parsers: ordered chains and sign dispatch.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from .context import MoneyParseContext, MoneyPrintContext

if TYPE_CHECKING:
    from moneyfmt.money import BigMoney

    from .builder import MoneyFormatterBuilder
    from .formatter import MoneyFormatter
    from .printers import MoneyParser, MoneyPrinter, TextSink

__all__ = ["MultiPrinterParser", "SignedPrinterParser"]


@dataclass(frozen=True, slots=True)
class MultiPrinterParser:
    """Fixed sequence of printer/parser pairs executed in order.

    A slot may hold None for the printer or the parser, which makes the
    whole chain print-only or parse-only. Capability is checked by the
    formatter at call time.
    """

    printers: tuple[MoneyPrinter | None, ...]
    parsers: tuple[MoneyParser | None, ...]

    def is_printer(self) -> bool:
        return None not in self.printers

    def is_parser(self) -> bool:
        return None not in self.parsers

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        for printer in self.printers:
            printer.print(context, sink, money)  # type: ignore[union-attr]

    def parse(self, context: MoneyParseContext) -> None:
        """Run each parser in turn, stopping at the first error."""
        for parser in self.parsers:
            parser.parse(context)  # type: ignore[union-attr]
            if context.is_error():
                break

    def append_to(self, builder: MoneyFormatterBuilder) -> None:
        """Splice every pair of this chain onto builder."""
        for printer, parser in zip(self.printers, self.parsers, strict=True):
            builder.append(printer, parser)

    def __str__(self) -> str:
        printers = "".join(str(p) for p in self.printers) if self.is_printer() else ""
        parsers = "".join(str(p) for p in self.parsers) if self.is_parser() else ""
        if self.is_printer() and not self.is_parser():
            return printers
        if self.is_parser() and not self.is_printer():
            return parsers
        if printers == parsers:
            return printers
        return f"{printers}:{parsers}"


@dataclass(frozen=True, slots=True)
class SignedPrinterParser:
    """Chooses among three formatters by the sign class of the value.

    Printing delegates to the formatter for positive, zero or negative
    values. Parsing tries all three from the same cursor and keeps the
    error-free attempt that consumed the most text; ties go to positive,
    then zero, then negative.
    """

    when_positive: MoneyFormatter
    when_zero: MoneyFormatter
    when_negative: MoneyFormatter

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        if money.is_zero():
            formatter = self.when_zero
        elif money.is_positive():
            formatter = self.when_positive
        else:
            formatter = self.when_negative
        formatter.printer_parser.print(context, sink, money)

    def parse(self, context: MoneyParseContext) -> None:
        positive = context.create_child()
        self.when_positive.printer_parser.parse(positive)
        zero = context.create_child()
        self.when_zero.printer_parser.parse(zero)
        negative = context.create_child()
        self.when_negative.printer_parser.parse(negative)

        best: MoneyParseContext | None = None
        for candidate in (positive, zero, negative):
            if candidate.is_error():
                continue
            if best is None or candidate.index > best.index:
                best = candidate
        if best is None:
            context.set_error()
            return

        context.merge_child(best)
        if best is zero:
            if context.amount is None or context.amount != 0:
                context.amount = Decimal(0)
        elif best is negative and context.amount is not None and context.amount > 0:
            context.amount = -context.amount

    def __str__(self) -> str:
        return f"PositiveZeroNegative({self.when_positive},{self.when_zero},{self.when_negative})"
