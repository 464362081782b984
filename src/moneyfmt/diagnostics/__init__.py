"""Diagnostic system for money formatting errors.

Provides structured error diagnostics with codes, indices and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
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
from .templates import ErrorTemplate

__all__ = [
    "CurrencyMismatchError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "ExchangeRateFormatError",
    "IllegalCurrencyError",
    "IncompleteParseError",
    "MoneyError",
    "MoneyFormatError",
    "MoneyParseError",
    "UnparsedTextError",
    "UnsupportedOperationError",
]
