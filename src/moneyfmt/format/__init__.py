"""Text codec for monetary values.

Formatters are assembled from printer/parser components with
MoneyFormatterBuilder and bound to a Babel locale. The same chain prints
values and parses text back into them.

Exports:
    MoneyFormatterBuilder, MoneyFormatter: Build and use money formatters
    MoneyAmountStyle, GroupingStyle: Amount characters and grouping policy
    MoneyParseContext, MoneyPrintContext, ParsePosition: Per-call state
    MoneyPrinter, MoneyParser: Protocols for custom components
    ExchangeRateFormatterBuilder, ExchangeRateFormatter: Rate formatting
"""

from .amount_style import GroupingStyle, MoneyAmountStyle
from .builder import MoneyFormatterBuilder
from .context import (
    ExchangeRateParseContext,
    ExchangeRatePrintContext,
    MoneyParseContext,
    MoneyPrintContext,
    ParsePosition,
)
from .exchange_rate import ExchangeRateFormatter, ExchangeRateFormatterBuilder
from .formatter import MoneyFormatter
from .printers import MoneyParser, MoneyPrinter

__all__ = [
    "ExchangeRateFormatter",
    "ExchangeRateFormatterBuilder",
    "ExchangeRateParseContext",
    "ExchangeRatePrintContext",
    "GroupingStyle",
    "MoneyAmountStyle",
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    "MoneyParseContext",
    "MoneyParser",
    "MoneyPrintContext",
    "MoneyPrinter",
    "ParsePosition",
]
