"""Money exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object built
by ErrorTemplate.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MoneyError(Exception):
    """Base exception for all moneyfmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class IllegalCurrencyError(MoneyError, ValueError):
    """Currency code is not known to the registry."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Operation combined monetary values of different currencies."""


class UnsupportedOperationError(MoneyError, NotImplementedError):
    """Formatter lacks the capability (print or parse) that was invoked.

    Raised at call time, never at build time: a builder may legitimately
    produce a print-only or parse-only formatter.
    """


class MoneyFormatError(MoneyError):
    """Failure in the money formatting domain.

    Sink failures during ``MoneyFormatter.print_to()`` are wrapped in this
    exception with the original OSError chained as ``__cause__``.

    Example:
        >>> try:
        ...     formatter.print_to(stream, money)
        ... except MoneyFormatError as e:
        ...     e.rethrow_io_error()  # re-raises the OSError if that was the cause
        ...     raise
    """

    def rethrow_io_error(self) -> None:
        """Re-raise the underlying OSError if this error wraps one.

        Returns normally when the cause is not an OSError.

        Raises:
            OSError: The sink failure that caused this error
        """
        cause = self.__cause__
        if isinstance(cause, OSError):
            raise cause


class MoneyParseError(MoneyFormatError):
    """Strict parse failed because a component reported an error.

    The two subclasses distinguish the other strict-parse failures;
    catching MoneyParseError handles all three.

    Attributes:
        text: The input that failed to parse
        index: Error index (or cursor index for UnparsedTextError)
    """

    def __init__(self, message: str | Diagnostic, *, text: str = "", index: int = -1) -> None:
        """Initialize MoneyParseError.

        Args:
            message: Error message string OR Diagnostic object
            text: The input that failed to parse
            index: Position associated with the failure (-1 if none)
        """
        super().__init__(message)
        self.text = text
        self.index = index


class UnparsedTextError(MoneyParseError):
    """Strict parse succeeded but did not consume the whole input."""


class IncompleteParseError(MoneyParseError):
    """Strict parse consumed the input but did not find every component."""


class ExchangeRateFormatError(MoneyFormatError):
    """Failure while printing or parsing an exchange rate."""
