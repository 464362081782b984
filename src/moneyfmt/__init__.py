"""moneyfmt - Locale-aware printing and parsing of monetary values.

Builds bidirectional formatters from small components (amount, currency
code, symbol, literal text, sign dispatch) and binds them to a locale.
Locale conventions come from Unicode CLDR via Babel.

Public API:
    MoneyFormatterBuilder - Fluent construction of formatters
    MoneyFormatter - Print money to text and parse it back
    MoneyAmountStyle - Digit, sign, decimal and grouping characters
    GroupingStyle - Grouping policy (NONE, FULL, BEFORE_DECIMAL_POINT)
    ExchangeRateFormatterBuilder / ExchangeRateFormatter - Rate formatting
    CurrencyUnit, BigMoney, Money, ExchangeRate - Value types

Exceptions:
    MoneyError - Base exception class
    MoneyFormatError - Formatting failures (including sink failures)
    MoneyParseError - Strict parse failures
    UnparsedTextError / IncompleteParseError - Strict parse failure kinds
    IllegalCurrencyError - Unknown currency code

Submodules:
    moneyfmt.format - Printer/parser components, contexts and styles
    moneyfmt.money - Value types and the currency registry
    moneyfmt.diagnostics - Error codes, templates and exceptions
"""

from .diagnostics import (
    CurrencyMismatchError,
    ExchangeRateFormatError,
    IllegalCurrencyError,
    IncompleteParseError,
    MoneyError,
    MoneyFormatError,
    MoneyParseError,
    UnparsedTextError,
    UnsupportedOperationError,
)
from .format import (
    ExchangeRateFormatter,
    ExchangeRateFormatterBuilder,
    GroupingStyle,
    MoneyAmountStyle,
    MoneyFormatter,
    MoneyFormatterBuilder,
)
from .money import BigMoney, BigMoneyProvider, CurrencyUnit, ExchangeRate, Money

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BigMoney",
    "BigMoneyProvider",
    "CurrencyMismatchError",
    "CurrencyUnit",
    "ExchangeRate",
    "ExchangeRateFormatError",
    "ExchangeRateFormatter",
    "ExchangeRateFormatterBuilder",
    "GroupingStyle",
    "IllegalCurrencyError",
    "IncompleteParseError",
    "Money",
    "MoneyAmountStyle",
    "MoneyError",
    "MoneyFormatError",
    "MoneyFormatter",
    "MoneyFormatterBuilder",
    "MoneyParseError",
    "UnparsedTextError",
    "UnsupportedOperationError",
    "__version__",
]
