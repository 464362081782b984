"""Monetary value types consumed by the format package.

Exports:
    CurrencyUnit: ISO 4217 currency with registry lookups
    BigMoney: Amount of any scale in a currency
    Money: Amount at the currency's scale
    BigMoneyProvider: Protocol for values convertible to BigMoney
    ExchangeRate: Rate between a source and a target currency
"""

from .currency import CurrencyUnit
from .exchange_rate import ExchangeRate
from .money import BigMoney, BigMoneyProvider, Money

__all__ = ["BigMoney", "BigMoneyProvider", "CurrencyUnit", "ExchangeRate", "Money"]
