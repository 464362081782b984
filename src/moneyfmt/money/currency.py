"""ISO 4217 currency units backed by a static registry and Babel symbols.

The registry is built once from ``constants.ISO_4217_CURRENCIES`` and is
read-only afterwards; lookups are thread-safe. Localized symbols come from
Unicode CLDR via Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel.numbers import get_currency_symbol

from moneyfmt.constants import (
    ISO_4217_CURRENCIES,
    ISO_CURRENCY_CODE_LENGTH,
    ISO_NUMERIC_CODE_LENGTH,
    PSEUDO_CURRENCY_DECIMALS,
)
from moneyfmt.diagnostics import ErrorTemplate, IllegalCurrencyError
from moneyfmt.locale_utils import LocaleLike, resolve_locale

__all__ = ["CurrencyUnit"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class CurrencyUnit:
    """A unit of currency identified by its ISO 4217 code.

    Immutable, hashable and ordered by code. Obtain instances through
    ``CurrencyUnit.of()`` or ``CurrencyUnit.of_numeric_code()`` rather than
    the constructor, so that only registered currencies circulate.

    Attributes:
        code: Three-letter alphabetic code (e.g., 'GBP')
        numeric_code: ISO numeric code (e.g., 826)
        raw_decimal_places: Decimal places, -1 for pseudo-currencies
    """

    code: str
    numeric_code: int
    raw_decimal_places: int

    @classmethod
    def of(cls, code: str) -> CurrencyUnit:
        """Look up a currency by its alphabetic code (case-sensitive).

        Raises:
            TypeError: If code is not a str
            IllegalCurrencyError: If the code is not registered
        """
        if not isinstance(code, str):
            msg = f"Currency code must be a str, got {type(code).__name__}"
            raise TypeError(msg)
        unit = _registry_by_code().get(code)
        if unit is None:
            raise IllegalCurrencyError(ErrorTemplate.currency_unknown(code))
        return unit

    @classmethod
    def of_numeric_code(cls, numeric_code: str | int) -> CurrencyUnit:
        """Look up a currency by its numeric code.

        Strings of one to three ASCII digits are accepted with or without
        leading zeros ('8', '08' and '008' all identify ALL).

        Raises:
            IllegalCurrencyError: If the code is malformed or not registered
        """
        if isinstance(numeric_code, str):
            if not (
                0 < len(numeric_code) <= ISO_NUMERIC_CODE_LENGTH
                and numeric_code.isascii()
                and numeric_code.isdigit()
            ):
                raise IllegalCurrencyError(ErrorTemplate.currency_unknown(numeric_code))
            value = int(numeric_code)
        else:
            value = numeric_code
        unit = _registry_by_numeric().get(value)
        if unit is None:
            raise IllegalCurrencyError(ErrorTemplate.currency_unknown(str(numeric_code)))
        return unit

    @staticmethod
    def registered_currencies() -> tuple[CurrencyUnit, ...]:
        """All registered currencies, sorted by code."""
        return tuple(sorted(_registry_by_code().values()))

    @property
    def numeric3_code(self) -> str:
        """Numeric code zero-padded to three digits (e.g., '008')."""
        return f"{self.numeric_code:03d}"

    @property
    def decimal_places(self) -> int:
        """Decimal places of the currency's minor unit, 0 for pseudo-currencies."""
        return max(self.raw_decimal_places, 0)

    @property
    def is_pseudo_currency(self) -> bool:
        """True for codes such as XAU or XXX that have no minor unit."""
        return self.raw_decimal_places == PSEUDO_CURRENCY_DECIMALS

    def get_symbol(self, locale: LocaleLike) -> str:
        """Localized display symbol, e.g. '£' for GBP in en_GB.

        Falls back to the alphabetic code when CLDR has no symbol.
        """
        return str(get_currency_symbol(self.code, locale=resolve_locale(locale)))

    def __str__(self) -> str:
        return self.code


@functools.lru_cache(maxsize=1)
def _registry_by_code() -> dict[str, CurrencyUnit]:
    registry = {
        code: CurrencyUnit(code, numeric, digits)
        for code, (numeric, digits) in ISO_4217_CURRENCIES.items()
        if len(code) == ISO_CURRENCY_CODE_LENGTH
    }
    logger.debug("Loaded %d currencies into registry", len(registry))
    return registry


@functools.lru_cache(maxsize=1)
def _registry_by_numeric() -> dict[int, CurrencyUnit]:
    return {unit.numeric_code: unit for unit in _registry_by_code().values()}
