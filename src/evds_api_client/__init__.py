"""Public package exports for EVDS API client."""

from .async_client import AsyncEvdsClient
from .client import EvdsClient
from .common import ApiKey, Evds, ReturnFormat
from .config import EvdsClientConfig
from .currency import (
    CurrencyCode,
    CurrencyCodes,
    CurrencySeries,
    ExchangeType,
    MultipleCurrencySeries,
)
from .date import Date, DateRange
from .frequency_formulas import AdvancedProcesses, AggregationType, DataFrequency, Formula

__all__ = [
    "EvdsClient",
    "AsyncEvdsClient",
    "EvdsClientConfig",
    "ApiKey",
    "ReturnFormat",
    "Evds",
    "Date",
    "DateRange",
    "CurrencyCode",
    "CurrencyCodes",
    "ExchangeType",
    "CurrencySeries",
    "MultipleCurrencySeries",
    "AdvancedProcesses",
    "AggregationType",
    "Formula",
    "DataFrequency",
]
