"""Locale utilities for BCP-47 to POSIX conversion and Babel Locale lookup.

Centralizes locale format normalization used throughout the codebase.
Formatters, contexts and amount styles all work with Babel ``Locale``
objects; callers may pass either a ``Locale`` or a locale code string.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TypeAlias

from babel import Locale, UnknownLocaleError

from moneyfmt.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

__all__ = [
    "LocaleLike",
    "default_locale",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

LocaleLike: TypeAlias = Locale | str
"""A Babel Locale or a BCP-47/POSIX locale code (e.g., 'en-GB', 'de_DE')."""


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def resolve_locale(locale: LocaleLike | None) -> Locale:
    """Convert a locale argument into a Babel Locale, strictly.

    Args:
        locale: Babel Locale or locale code

    Returns:
        Babel Locale

    Raises:
        TypeError: If locale is None or not a str/Locale
        ValueError: If the locale code is unknown or malformed
    """
    if isinstance(locale, Locale):
        return locale
    if not isinstance(locale, str):
        msg = f"Locale must be a babel.Locale or str, got {type(locale).__name__}"
        raise TypeError(msg)
    try:
        return get_babel_locale(locale)
    except UnknownLocaleError as e:
        msg = f"Unknown locale identifier '{locale}': {e}"
        raise ValueError(msg) from None
    except ValueError as e:
        msg = f"Invalid locale format '{locale}': {e}"
        raise ValueError(msg) from None


def default_locale() -> Locale:
    """Resolve the process default locale, falling back to en_US.

    Unknown or malformed system locales are logged at WARNING level and
    replaced by ``DEFAULT_LOCALE`` so that formatter construction always
    succeeds.
    """
    locale_code = get_system_locale()
    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    return get_babel_locale(DEFAULT_LOCALE)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            if "." in system_locale:
                system_locale = system_locale.split(".")[0]
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            locale_code = value.split(".")[0]
            if locale_code in ("C", "POSIX"):
                continue
            return normalize_locale(locale_code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
