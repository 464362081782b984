"""Numeric style for printing and parsing monetary amounts.

MoneyAmountStyle describes the characters and grouping policy used for the
amount part of a formatted value. Any field may be left as None, meaning
"take it from the locale when the style is used". ``localize()`` fills the
unresolved fields from a per-locale prototype derived from Unicode CLDR
data via Babel.

Architecture:
    - GroupingStyle: where grouping characters go (NONE, FULL, BEFORE_DECIMAL_POINT)
    - MoneyAmountStyle: immutable style descriptor with with_* setters
    - Locale prototype cache: class-level dict guarded by a Lock

Thread Safety:
    Styles are immutable and may be shared freely. The prototype cache uses
    insert-if-absent semantics; two threads computing the same locale at
    once store value-equal results, so the race is harmless.

Python 3.13+. Uses Babel for CLDR number symbols.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import ClassVar

from babel import Locale
from babel.numbers import (
    format_decimal,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
)

from moneyfmt.constants import DEFAULT_GROUPING_SIZE
from moneyfmt.locale_utils import LocaleLike, resolve_locale

__all__ = ["GroupingStyle", "MoneyAmountStyle"]

logger = logging.getLogger(__name__)

# LRM, RLM and ALM wrap the minus sign in bidi locales such as ar and he
_BIDI_MARKS = str.maketrans("", "", "\u200e\u200f\u061c")

# CLDR patterns without grouping report a grouping size of 1000
_MAX_GROUPING_SIZE = 1000


class GroupingStyle(Enum):
    """Where the grouping character is inserted into a number."""

    NONE = "NONE"
    """No grouping."""

    FULL = "FULL"
    """Group the whole number part and the fraction part."""

    BEFORE_DECIMAL_POINT = "BEFORE_DECIMAL_POINT"
    """Group the whole number part only."""


def _check_character(name: str, value: str | None) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        msg = f"{name} must be a single-character str or None, got {type(value).__name__}"
        raise TypeError(msg)
    if len(value) != 1:
        msg = f"{name} must be a single character, got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MoneyAmountStyle:
    """Characters and grouping rules for the amount of a monetary value.

    Instances are immutable and compare structurally. Use the predefined
    constants and the ``with_*`` methods rather than the constructor.

    Examples:
        >>> style = MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA
        >>> style.with_grouping_size(3) is style
        True
        >>> MoneyAmountStyle.of("de-DE").decimal_point_character
        ','
    """

    ASCII_DECIMAL_POINT_GROUP3_COMMA: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_POINT_GROUP3_SPACE: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_POINT_NO_GROUPING: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_GROUP3_DOT: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_GROUP3_SPACE: ClassVar[MoneyAmountStyle]
    ASCII_DECIMAL_COMMA_NO_GROUPING: ClassVar[MoneyAmountStyle]
    LOCALIZED_GROUPING: ClassVar[MoneyAmountStyle]
    LOCALIZED_NO_GROUPING: ClassVar[MoneyAmountStyle]

    # Locale identifier -> fully resolved prototype
    _cache: ClassVar[dict[str, MoneyAmountStyle]] = {}
    _cache_lock: ClassVar[Lock] = Lock()

    zero_character: str | None
    positive_sign_character: str | None
    negative_sign_character: str | None
    decimal_point_character: str | None
    grouping_style: GroupingStyle | None
    grouping_character: str | None
    grouping_size: int | None
    extended_grouping_size: int | None
    forced_decimal_point: bool = False
    abs_value: bool = False

    def __post_init__(self) -> None:
        _check_character("zero_character", self.zero_character)
        _check_character("positive_sign_character", self.positive_sign_character)
        _check_character("negative_sign_character", self.negative_sign_character)
        _check_character("decimal_point_character", self.decimal_point_character)
        _check_character("grouping_character", self.grouping_character)
        if self.grouping_style is not None and not isinstance(self.grouping_style, GroupingStyle):
            kind = type(self.grouping_style).__name__
            msg = f"grouping_style must be a GroupingStyle, got {kind}"
            raise TypeError(msg)
        if self.grouping_size is not None and self.grouping_size <= 0:
            msg = f"Grouping size must be greater than zero, got {self.grouping_size}"
            raise ValueError(msg)
        if self.extended_grouping_size is not None and self.extended_grouping_size < 0:
            msg = f"Extended grouping size must not be negative, got {self.extended_grouping_size}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Locale resolution
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, locale: LocaleLike) -> MoneyAmountStyle:
        """Fully localized style with grouping for the given locale."""
        return cls.LOCALIZED_GROUPING.localize(locale)

    def localize(self, locale: LocaleLike) -> MoneyAmountStyle:
        """Fill every unresolved field from the locale's prototype.

        Resolved fields are left untouched, so a fully resolved style is
        returned as-is and ``localize`` is idempotent.

        Raises:
            TypeError: If locale is not a babel.Locale or str
            ValueError: If the locale code is unknown
        """
        unresolved = [
            field.name for field in dataclasses.fields(self) if getattr(self, field.name) is None
        ]
        if not unresolved:
            return self
        prototype = self._prototype(resolve_locale(locale))
        return dataclasses.replace(
            self, **{name: getattr(prototype, name) for name in unresolved}
        )

    @classmethod
    def _prototype(cls, locale: Locale) -> MoneyAmountStyle:
        key = str(locale)
        with cls._cache_lock:
            cached = cls._cache.get(key)
        if cached is not None:
            return cached
        prototype = _prototype_from_cldr(locale)
        logger.debug("Computed amount style prototype for locale '%s'", key)
        with cls._cache_lock:
            return cls._cache.setdefault(key, prototype)

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the per-locale prototype cache.

        Use this method to reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get the number of cached locale prototypes."""
        with cls._cache_lock:
            return len(cls._cache)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def with_zero_character(self, zero_character: str | None) -> MoneyAmountStyle:
        """Copy with the first of the ten contiguous digit characters."""
        if zero_character == self.zero_character:
            return self
        return dataclasses.replace(self, zero_character=zero_character)

    def with_positive_sign_character(self, positive_character: str | None) -> MoneyAmountStyle:
        if positive_character == self.positive_sign_character:
            return self
        return dataclasses.replace(self, positive_sign_character=positive_character)

    def with_negative_sign_character(self, negative_character: str | None) -> MoneyAmountStyle:
        if negative_character == self.negative_sign_character:
            return self
        return dataclasses.replace(self, negative_sign_character=negative_character)

    def with_decimal_point_character(self, decimal_point_character: str | None) -> MoneyAmountStyle:
        if decimal_point_character == self.decimal_point_character:
            return self
        return dataclasses.replace(self, decimal_point_character=decimal_point_character)

    def with_grouping_style(self, grouping_style: GroupingStyle) -> MoneyAmountStyle:
        """Copy with a different grouping policy.

        Raises:
            TypeError: If grouping_style is not a GroupingStyle (including None)
        """
        if not isinstance(grouping_style, GroupingStyle):
            msg = f"grouping_style must be a GroupingStyle, got {type(grouping_style).__name__}"
            raise TypeError(msg)
        if grouping_style is self.grouping_style:
            return self
        return dataclasses.replace(self, grouping_style=grouping_style)

    def with_grouping_character(self, grouping_character: str | None) -> MoneyAmountStyle:
        if grouping_character == self.grouping_character:
            return self
        return dataclasses.replace(self, grouping_character=grouping_character)

    def with_grouping_size(self, grouping_size: int | None) -> MoneyAmountStyle:
        """Copy with a different primary group size.

        Raises:
            ValueError: If grouping_size is zero or negative
        """
        if grouping_size == self.grouping_size:
            return self
        return dataclasses.replace(self, grouping_size=grouping_size)

    def with_extended_grouping_size(self, extended_grouping_size: int | None) -> MoneyAmountStyle:
        """Copy with a different secondary group size (0 means same as primary).

        Raises:
            ValueError: If extended_grouping_size is negative
        """
        if extended_grouping_size == self.extended_grouping_size:
            return self
        return dataclasses.replace(self, extended_grouping_size=extended_grouping_size)

    def with_forced_decimal_point(self, forced_decimal_point: bool) -> MoneyAmountStyle:
        if forced_decimal_point == self.forced_decimal_point:
            return self
        return dataclasses.replace(self, forced_decimal_point=forced_decimal_point)

    def with_abs_value(self, abs_value: bool) -> MoneyAmountStyle:
        if abs_value == self.abs_value:
            return self
        return dataclasses.replace(self, abs_value=abs_value)


def _prototype_from_cldr(locale: Locale) -> MoneyAmountStyle:
    """Derive a fully resolved style from the locale's default numbering system."""
    zero = str(format_decimal(0, format="0", locale=locale, numbering_system="default"))[0]
    decimal_point = str(get_decimal_symbol(locale, numbering_system="default"))
    grouping_character = str(get_group_symbol(locale, numbering_system="default"))
    minus = str(get_minus_sign_symbol(locale, numbering_system="default")).translate(_BIDI_MARKS)
    if len(minus) != 1:
        minus = "-"
    primary, secondary = _grouping_sizes(locale)
    return MoneyAmountStyle(
        zero_character=zero,
        positive_sign_character="+",
        negative_sign_character=minus,
        decimal_point_character=decimal_point[:1] or ".",
        grouping_style=GroupingStyle.FULL,
        grouping_character=grouping_character[:1] or ",",
        grouping_size=primary,
        extended_grouping_size=0 if secondary == primary else secondary,
    )


def _grouping_sizes(locale: Locale) -> tuple[int, int]:
    pattern = locale.currency_formats.get("standard") or locale.decimal_formats.get(None)
    if pattern is None:
        return DEFAULT_GROUPING_SIZE, DEFAULT_GROUPING_SIZE
    primary, secondary = pattern.grouping
    if not 0 < primary < _MAX_GROUPING_SIZE:
        return DEFAULT_GROUPING_SIZE, DEFAULT_GROUPING_SIZE
    if not 0 < secondary < _MAX_GROUPING_SIZE:
        secondary = primary
    return primary, secondary


_ascii = MoneyAmountStyle(
    zero_character="0",
    positive_sign_character="+",
    negative_sign_character="-",
    decimal_point_character=".",
    grouping_style=GroupingStyle.FULL,
    grouping_character=",",
    grouping_size=3,
    extended_grouping_size=0,
)
MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA = _ascii
MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_SPACE = _ascii.with_grouping_character(" ")
MoneyAmountStyle.ASCII_DECIMAL_POINT_NO_GROUPING = _ascii.with_grouping_style(GroupingStyle.NONE)
MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_DOT = _ascii.with_decimal_point_character(
    ","
).with_grouping_character(".")
MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_SPACE = _ascii.with_decimal_point_character(
    ","
).with_grouping_character(" ")
MoneyAmountStyle.ASCII_DECIMAL_COMMA_NO_GROUPING = _ascii.with_decimal_point_character(
    ","
).with_grouping_style(GroupingStyle.NONE)
MoneyAmountStyle.LOCALIZED_GROUPING = MoneyAmountStyle(
    zero_character=None,
    positive_sign_character=None,
    negative_sign_character=None,
    decimal_point_character=None,
    grouping_style=GroupingStyle.FULL,
    grouping_character=None,
    grouping_size=None,
    extended_grouping_size=None,
)
MoneyAmountStyle.LOCALIZED_NO_GROUPING = MoneyAmountStyle.LOCALIZED_GROUPING.with_grouping_style(
    GroupingStyle.NONE
)
del _ascii
