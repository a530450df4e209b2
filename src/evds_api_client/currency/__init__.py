"""Currency series package."""

from .codes import CurrencyCode, CurrencyCodes, ExchangeType
from .series import CurrencySeries, MultipleCurrencySeries

__all__ = [
    "CurrencyCode",
    "CurrencyCodes",
    "ExchangeType",
    "CurrencySeries",
    "MultipleCurrencySeries",
]
