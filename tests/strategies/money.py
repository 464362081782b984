"""Hypothesis strategies for money formatting property-based testing.

Usage:
    from tests.strategies.money import big_money_values, round_trip_styles

Event-Emitting Strategies (HypoFuzz-Optimized):
    - amounts: Emits amount_magnitude and amount_sign events
    - round_trip_styles: Emits style_grouping events
    - big_money_values: Emits money_currency_decimals events

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from moneyfmt.format import GroupingStyle, MoneyAmountStyle
from moneyfmt.money import BigMoney, CurrencyUnit

# Locales with distinct decimal, grouping and digit conventions
FORMATTING_LOCALES: list[str] = [
    "en_GB", "en_US", "de_DE", "fr_FR", "pl_PL", "lv_LV", "hi_IN", "ja_JP", "ar_EG",
]

_ASCII_STYLES: list[MoneyAmountStyle] = [
    MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_COMMA,
    MoneyAmountStyle.ASCII_DECIMAL_POINT_GROUP3_SPACE,
    MoneyAmountStyle.ASCII_DECIMAL_POINT_NO_GROUPING,
    MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_DOT,
    MoneyAmountStyle.ASCII_DECIMAL_COMMA_GROUP3_SPACE,
    MoneyAmountStyle.ASCII_DECIMAL_COMMA_NO_GROUPING,
]


def currency_units() -> st.SearchStrategy[CurrencyUnit]:
    """Any registered currency."""
    return st.sampled_from(CurrencyUnit.registered_currencies())


@composite
def amounts(draw: st.DrawFn, max_scale: int = 6) -> Decimal:
    """Generate amounts of varied magnitude, sign and scale.

    Events emitted:
    - amount_magnitude={zero|small|large}
    - amount_sign={positive|negative|zero}
    """
    unscaled = draw(
        st.one_of(
            st.just(0),
            st.integers(min_value=-9999, max_value=9999),
            st.integers(min_value=-(10**18), max_value=10**18),
        )
    )
    scale = draw(st.integers(min_value=0, max_value=max_scale))
    amount = Decimal(unscaled).scaleb(-scale)

    magnitude = abs(unscaled)
    if magnitude == 0:
        event("amount_magnitude=zero")
        event("amount_sign=zero")
    else:
        event(f"amount_magnitude={'small' if magnitude < 10**4 else 'large'}")
        event(f"amount_sign={'negative' if unscaled < 0 else 'positive'}")
    return amount


@composite
def big_money_values(draw: st.DrawFn) -> BigMoney:
    """Generate BigMoney values in any registered currency.

    Events emitted:
    - money_currency_decimals={n}
    """
    currency = draw(currency_units())
    event(f"money_currency_decimals={currency.raw_decimal_places}")
    return BigMoney.of(currency, draw(amounts()))


@composite
def round_trip_styles(draw: st.DrawFn) -> MoneyAmountStyle:
    """Generate ASCII styles whose printed output parses back to the same value.

    Grouping sizes and policies vary; absolute-value printing is excluded
    because it discards the sign.

    Events emitted:
    - style_grouping={NONE|FULL|BEFORE_DECIMAL_POINT}
    """
    style = draw(st.sampled_from(_ASCII_STYLES))
    if style.grouping_style is not GroupingStyle.NONE:
        style = style.with_grouping_style(
            draw(st.sampled_from([GroupingStyle.FULL, GroupingStyle.BEFORE_DECIMAL_POINT]))
        )
        style = style.with_grouping_size(draw(st.integers(min_value=1, max_value=4)))
        style = style.with_extended_grouping_size(draw(st.integers(min_value=0, max_value=4)))
    style = style.with_forced_decimal_point(draw(st.booleans()))
    event(f"style_grouping={style.grouping_style.name}")  # type: ignore[union-attr]
    return style
