"""Tests for locale_utils: normalization, Babel lookup and system locale detection.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from moneyfmt.locale_utils import (
    default_locale,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    resolve_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-GB") == "en_GB"

    def test_already_normalized(self) -> None:
        """POSIX input is returned unchanged."""
        assert normalize_locale("de_DE") == "de_DE"

    def test_simple_locale(self) -> None:
        """Language-only codes pass through."""
        assert normalize_locale("fr") == "fr"


class TestGetBabelLocale:
    """Test cached Babel Locale lookup."""

    def test_bcp47_format(self) -> None:
        """BCP-47 codes resolve to Babel locales."""
        locale = get_babel_locale("en-GB")
        assert locale.language == "en"
        assert locale.territory == "GB"

    def test_caching(self) -> None:
        """Repeated lookups return the same instance."""
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")

    def test_invalid_locale_raises(self) -> None:
        """Unknown locales raise from Babel."""
        with pytest.raises((ValueError, UnknownLocaleError)):
            get_babel_locale("xx-YY-invalid")


class TestResolveLocale:
    """Test strict conversion of locale arguments."""

    def test_locale_passes_through(self) -> None:
        """Babel Locale objects are returned as-is."""
        locale = Locale.parse("pl_PL")
        assert resolve_locale(locale) is locale

    def test_string_resolved(self) -> None:
        """Locale codes are parsed."""
        assert str(resolve_locale("en-GB")) == "en_GB"

    def test_none_raises_type_error(self) -> None:
        """None is rejected with TypeError."""
        with pytest.raises(TypeError, match="Locale must be a babel.Locale or str"):
            resolve_locale(None)

    def test_wrong_type_raises_type_error(self) -> None:
        """Non-string values are rejected with TypeError."""
        with pytest.raises(TypeError):
            resolve_locale(42)  # type: ignore[arg-type]

    def test_unknown_locale_raises_value_error(self) -> None:
        """Unknown locale codes raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale identifier 'zz_ZZ'"):
            resolve_locale("zz_ZZ")


class TestDefaultLocale:
    """Test default_locale fallback behavior."""

    def test_uses_system_locale(self) -> None:
        """The detected system locale is used when Babel knows it."""
        with patch("moneyfmt.locale_utils.get_system_locale", return_value="de_DE"):
            assert str(default_locale()) == "de_DE"

    def test_unknown_system_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown system locales fall back to en_US with a warning."""
        with (
            patch("moneyfmt.locale_utils.get_system_locale", return_value="zz_ZZ"),
            caplog.at_level(logging.WARNING, logger="moneyfmt.locale_utils"),
        ):
            locale = default_locale()
        assert str(locale) == "en_US"
        assert "Falling back to en_US" in caplog.text


class TestGetSystemLocale:
    """Test get_system_locale function with environment and OS detection."""

    def test_getlocale_success(self) -> None:
        """OS-level locale.getlocale() result is used."""
        with patch("locale.getlocale", return_value=("en_GB", "UTF-8")):
            assert get_system_locale() == "en_GB"

    def test_getlocale_with_encoding(self) -> None:
        """Encoding suffix is stripped."""
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    def test_getlocale_c_filtered(self) -> None:
        """'C' from getlocale() falls through to environment variables."""
        with (
            patch("locale.getlocale", return_value=("C", None)),
            patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    def test_getlocale_valueerror_fallback(self) -> None:
        """ValueError from getlocale() falls through to environment variables."""
        with (
            patch("locale.getlocale", side_effect=ValueError("mock error")),
            patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"

    def test_lc_all_priority(self) -> None:
        """LC_ALL wins over LC_MESSAGES and LANG."""
        env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "de_DE"

    def test_env_var_posix_filtered(self) -> None:
        """'POSIX' in an environment variable is skipped."""
        env = {"LC_ALL": "POSIX", "LANG": "ja_JP.UTF-8"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "ja_JP"

    def test_bcp47_normalized(self) -> None:
        """BCP-47 values in environment variables are normalized."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LANG": "pt-BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"

    def test_no_locale_default_fallback(self) -> None:
        """No locale detected returns en_US."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == "en_US"

    def test_no_locale_raise_on_failure_true(self) -> None:
        """raise_on_failure=True raises RuntimeError when no locale is found."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)


@given(locale_code=st.from_regex(r"[a-z]{2}(-[A-Z]{2})?", fullmatch=True))
def test_property_normalize_locale_idempotent(locale_code: str) -> None:
    """Property: normalize_locale is idempotent."""
    event("outcome=idempotent")
    normalized_once = normalize_locale(locale_code)
    assert normalize_locale(normalized_once) == normalized_once
    assert "-" not in normalized_once
