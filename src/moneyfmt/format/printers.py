"""Leaf printer/parsers: amount, literal text and currency.

Each component implements ``print(context, sink, value)`` and
``parse(context)``. Printing writes to any object with a ``write(str)``
method. Parsing advances ``context.index`` on success or calls
``context.set_error()`` on malformed input; components never raise for
bad input text.

The numeric core (``print_number`` / ``parse_number``) is shared with the
exchange-rate ``${rate}`` component.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Protocol, runtime_checkable

from moneyfmt.constants import ISO_CURRENCY_CODE_LENGTH, ISO_NUMERIC_CODE_LENGTH
from moneyfmt.diagnostics import IllegalCurrencyError
from moneyfmt.money import BigMoney, CurrencyUnit

from .amount_style import GroupingStyle, MoneyAmountStyle
from .context import MoneyParseContext, MoneyPrintContext, ParseContext

__all__ = [
    "AmountPrinterParser",
    "CurrencyPrinterParser",
    "LiteralPrinterParser",
    "LocalizedSymbolPrinter",
    "MoneyParser",
    "MoneyPrinter",
    "TextSink",
    "parse_currency_code",
    "parse_number",
    "print_number",
]


class TextSink(Protocol):
    """Destination for printed text (io.StringIO, text files, ...)."""

    def write(self, text: str, /) -> object: ...


@runtime_checkable
class MoneyPrinter(Protocol):
    """Component that appends part of a monetary value to a sink."""

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        """Write this component's representation of money to sink."""
        ...


@runtime_checkable
class MoneyParser(Protocol):
    """Component that consumes part of the text held by a parse context."""

    def parse(self, context: MoneyParseContext) -> None:
        """Advance the context past this component, or mark it errored."""
        ...


# ----------------------------------------------------------------------
# Numeric core
# ----------------------------------------------------------------------


@functools.lru_cache(maxsize=16)
def _digit_table(zero_character: str) -> dict[int, int]:
    base = ord(zero_character)
    return str.maketrans("0123456789", "".join(chr(base + i) for i in range(10)))


def _is_pre_grouping_point(remaining: int, grouping_size: int, extended_size: int) -> bool:
    if remaining >= grouping_size + extended_size:
        return (remaining - grouping_size) % extended_size == 0
    return remaining % grouping_size == 0


def _is_post_grouping_point(i: int, post: int, grouping_size: int, extended_size: int) -> bool:
    at_end = i + 1 >= post
    if i > grouping_size:
        return (i - grouping_size) % extended_size == extended_size - 1 and not at_end
    return i % grouping_size == grouping_size - 1 and not at_end


def print_number(style: MoneyAmountStyle, sink: TextSink, amount: Decimal) -> None:
    """Write amount to sink using a fully localized style.

    Negative amounts get the negative sign character unless the style
    prints absolute values. Grouping follows the primary group size next
    to the decimal point and the extended size beyond it.
    """
    if amount < 0:
        amount = -amount
        if not style.abs_value:
            sink.write(style.negative_sign_character)
    digits = format(amount, "f")
    if style.zero_character != "0":
        digits = digits.translate(_digit_table(style.zero_character))
    decimal_point = digits.find(".")
    if style.grouping_style is GroupingStyle.NONE:
        if decimal_point < 0:
            sink.write(digits)
            if style.forced_decimal_point:
                sink.write(style.decimal_point_character)
        else:
            sink.write(
                digits[:decimal_point] + style.decimal_point_character + digits[decimal_point + 1 :]
            )
        return

    grouping_size = style.grouping_size
    extended_size = style.extended_grouping_size or grouping_size
    grouping_character = style.grouping_character
    pre = decimal_point if decimal_point >= 0 else len(digits)
    buf = [digits[0]]
    for i in range(1, pre):
        if _is_pre_grouping_point(pre - i, grouping_size, extended_size):
            buf.append(grouping_character)
        buf.append(digits[i])
    if decimal_point >= 0 or style.forced_decimal_point:
        buf.append(style.decimal_point_character)
    if decimal_point >= 0:
        fraction = digits[decimal_point + 1 :]
        if style.grouping_style is GroupingStyle.BEFORE_DECIMAL_POINT:
            buf.append(fraction)
        else:
            post = len(fraction)
            for i, ch in enumerate(fraction):
                buf.append(ch)
                if _is_post_grouping_point(i, post, grouping_size, extended_size):
                    buf.append(grouping_character)
    sink.write("".join(buf))


def parse_number(context: ParseContext, style: MoneyAmountStyle) -> Decimal | None:
    """Read a number at the cursor using a fully localized style.

    Accepts one leading sign, digits relative to the style's zero
    character, a single decimal point and single grouping characters.
    A second decimal point or a second consecutive grouping character ends
    the number and is left for the next component; a trailing grouping
    character is pushed back the same way.

    Returns:
        The number with the cursor moved past it, or None with the
        context marked as errored at the starting index.
    """
    text = context.text
    length = len(text)
    pos = context.index
    if pos >= length:
        context.set_error()
        return None

    zero = ord(style.zero_character)
    buf: list[str] = []
    decimal_seen = False
    ch = text[pos]
    if ch == style.negative_sign_character:
        buf.append("-")
    elif ch == style.positive_sign_character:
        buf.append("+")
    elif 0 <= ord(ch) - zero < 10:
        buf.append(chr(48 + ord(ch) - zero))
    elif ch == style.decimal_point_character:
        buf.append(".")
        decimal_seen = True
    else:
        context.set_error()
        return None

    last_was_group = False
    pos += 1
    while pos < length:
        ch = text[pos]
        if 0 <= ord(ch) - zero < 10:
            buf.append(chr(48 + ord(ch) - zero))
            last_was_group = False
        elif ch == style.decimal_point_character and not decimal_seen:
            buf.append(".")
            decimal_seen = True
            last_was_group = False
        elif ch == style.grouping_character and not last_was_group:
            last_was_group = True
        else:
            break
        pos += 1
    if last_was_group:
        pos -= 1

    try:
        value = Decimal("".join(buf))
    except InvalidOperation:
        context.set_error()
        return None
    context.index = pos
    return value


def parse_currency_code(context: ParseContext) -> CurrencyUnit | None:
    """Read a three-letter currency code at the cursor.

    Returns:
        The currency with the cursor moved past it, or None with the
        context marked as errored at the start of the code.
    """
    end = context.index + ISO_CURRENCY_CODE_LENGTH
    if end > context.text_length:
        context.set_error()
        return None
    try:
        currency = CurrencyUnit.of(context.get_text_substring(context.index, end))
    except IllegalCurrencyError:
        context.set_error()
        return None
    context.index = end
    return currency


# ----------------------------------------------------------------------
# Leaf components
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AmountPrinterParser:
    """Prints and parses the amount, localizing the style per call."""

    style: MoneyAmountStyle

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        print_number(self.style.localize(context.locale), sink, money.amount)

    def parse(self, context: MoneyParseContext) -> None:
        value = parse_number(context, self.style.localize(context.locale))
        if value is not None:
            context.amount = value

    def __str__(self) -> str:
        return "${amount}"


@dataclass(frozen=True, slots=True)
class LiteralPrinterParser:
    """Prints fixed text and requires an exact, case-sensitive match when parsing."""

    literal: str

    def print(self, context: MoneyPrintContext, sink: TextSink, value: object) -> None:
        sink.write(self.literal)

    def parse(self, context: ParseContext) -> None:
        end = context.index + len(self.literal)
        if end <= context.text_length and (
            context.get_text_substring(context.index, end) == self.literal
        ):
            context.index = end
        else:
            context.set_error()

    def __str__(self) -> str:
        return f"'{self.literal}'"


class CurrencyPrinterParser(Enum):
    """Currency code components: alphabetic, zero-padded numeric and plain numeric."""

    CODE = "${code}"
    NUMERIC_3_CODE = "${numeric3Code}"
    NUMERIC_CODE = "${numericCode}"

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        currency = money.currency
        match self:
            case CurrencyPrinterParser.CODE:
                sink.write(currency.code)
            case CurrencyPrinterParser.NUMERIC_3_CODE:
                sink.write(currency.numeric3_code)
            case CurrencyPrinterParser.NUMERIC_CODE:
                sink.write(str(currency.numeric_code))

    def parse(self, context: MoneyParseContext) -> None:
        match self:
            case CurrencyPrinterParser.CODE:
                currency = parse_currency_code(context)
                if currency is not None:
                    context.currency = currency
            case CurrencyPrinterParser.NUMERIC_3_CODE:
                self._parse_numeric(context, context.index + ISO_NUMERIC_CODE_LENGTH)
            case CurrencyPrinterParser.NUMERIC_CODE:
                end = context.index
                limit = min(context.text_length, context.index + ISO_NUMERIC_CODE_LENGTH)
                while end < limit and "0" <= context.text[end] <= "9":
                    end += 1
                self._parse_numeric(context, end)

    @staticmethod
    def _parse_numeric(context: MoneyParseContext, end: int) -> None:
        if end > context.text_length:
            context.set_error()
            return
        try:
            context.currency = CurrencyUnit.of_numeric_code(
                context.get_text_substring(context.index, end)
            )
        except IllegalCurrencyError:
            context.set_error()
            return
        context.index = end

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LocalizedSymbolPrinter:
    """Print-only component writing the currency symbol for the context locale.

    Symbols such as '$' are shared between currencies, so there is no
    parser counterpart.
    """

    def print(self, context: MoneyPrintContext, sink: TextSink, money: BigMoney) -> None:
        sink.write(money.currency.get_symbol(context.locale))

    def __str__(self) -> str:
        return "${symbolLocalized}"
