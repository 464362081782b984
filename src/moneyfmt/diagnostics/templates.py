"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from moneyfmt.constants import PARSE_PREVIEW_ELLIPSIS, PARSE_PREVIEW_LENGTH

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def preview(text: str) -> str:
        """Bound the quoted input in parse messages.

        Texts longer than PARSE_PREVIEW_LENGTH are truncated and marked
        with an ellipsis.
        """
        if len(text) > PARSE_PREVIEW_LENGTH:
            return text[:PARSE_PREVIEW_LENGTH] + PARSE_PREVIEW_ELLIPSIS
        return text

    # ------------------------------------------------------------------
    # Currency registry
    # ------------------------------------------------------------------

    @staticmethod
    def currency_unknown(code: str) -> Diagnostic:
        """Currency code not present in the registry.

        Args:
            code: The alphabetic or numeric code that was looked up

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency '{code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code such as 'GBP', or numeric code such as '826'",
        )

    @staticmethod
    def currency_mismatch(first: str, second: str) -> Diagnostic:
        """Two monetary values carry different currencies."""
        msg = f"Currencies differ: {first}/{second}"
        return Diagnostic(code=DiagnosticCode.CURRENCY_MISMATCH, message=msg)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def print_sink_failed(reason: str) -> Diagnostic:
        """Writing to a caller-supplied sink raised an OSError.

        Args:
            reason: str() of the underlying OSError

        Returns:
            Diagnostic for PRINT_SINK_FAILED
        """
        msg = f"Failed to write formatted output: {reason}" if reason else (
            "Failed to write formatted output"
        )
        return Diagnostic(
            code=DiagnosticCode.PRINT_SINK_FAILED,
            message=msg,
            hint="Call rethrow_io_error() to re-raise the underlying OSError",
        )

    @staticmethod
    def print_unsupported(formatter_name: str) -> Diagnostic:
        """Print requested from a parse-only chain."""
        msg = f"{formatter_name} has not been configured to be able to print"
        return Diagnostic(code=DiagnosticCode.PRINT_UNSUPPORTED, message=msg)

    @staticmethod
    def parse_unsupported(formatter_name: str) -> Diagnostic:
        """Parse requested from a print-only chain."""
        msg = f"{formatter_name} has not been configured to be able to parse"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNSUPPORTED,
            message=msg,
            hint="Print-only components such as ${symbolLocalized} have no parser",
        )

    # ------------------------------------------------------------------
    # Strict parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_error_at_index(text: str, index: int) -> Diagnostic:
        """A component marked the parse context as errored.

        Args:
            text: Full input text
            index: Error index recorded by the context

        Returns:
            Diagnostic for PARSE_ERROR_AT_INDEX
        """
        msg = f"Text could not be parsed at index {index}: {ErrorTemplate.preview(text)}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_ERROR_AT_INDEX,
            message=msg,
            index=index,
            hint="Check the input against the formatter pattern",
        )

    @staticmethod
    def parse_unparsed_text(text: str, index: int) -> Diagnostic:
        """Every component succeeded but input text remains."""
        msg = f"Unparsed text found at index {index}: {ErrorTemplate.preview(text)}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNPARSED_TEXT,
            message=msg,
            index=index,
            hint="Remove trailing text or extend the formatter pattern",
        )

    @staticmethod
    def parse_incomplete(text: str, missing: str) -> Diagnostic:
        """Parse consumed everything but did not find every component.

        Args:
            text: Full input text
            missing: Description of the components that must be present

        Returns:
            Diagnostic for PARSE_INCOMPLETE
        """
        msg = f"Parsing did not find {missing}: {ErrorTemplate.preview(text)}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INCOMPLETE,
            message=msg,
            hint="The formatter pattern must contain both a currency and an amount",
        )

    @staticmethod
    def parse_missing_component(target: str, component: str) -> Diagnostic:
        """A context was converted before the component was parsed.

        Args:
            target: Name of the value type being built (e.g., 'BigMoney')
            component: Missing component (e.g., 'currency', 'amount', 'rate')

        Returns:
            Diagnostic for the matching PARSE_MISSING_* code
        """
        code = {
            "amount": DiagnosticCode.PARSE_MISSING_AMOUNT,
            "rate": DiagnosticCode.PARSE_MISSING_RATE,
        }.get(component, DiagnosticCode.PARSE_MISSING_CURRENCY)
        msg = f"Cannot convert to {target} as no {component} found"
        return Diagnostic(code=code, message=msg)
