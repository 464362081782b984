"""Hypothesis strategies for moneyfmt property-based testing.

Usage:
    from tests.strategies import big_money_values, round_trip_styles
    from tests.strategies.money import amounts, currency_units
"""

from .money import (
    FORMATTING_LOCALES,
    amounts,
    big_money_values,
    currency_units,
    round_trip_styles,
)

__all__ = [
    "FORMATTING_LOCALES",
    "amounts",
    "big_money_values",
    "currency_units",
    "round_trip_styles",
]
