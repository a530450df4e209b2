"""Currency codes and exchange-rate column selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from ..core.errors import EvdsValidationError, ReturnError


class CurrencyCode(Enum):
    """Currencies published under the ``TP.DK`` indicative rate table."""

    USD = "USD"
    AUD = "AUD"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    CHF = "CHF"
    SEK = "SEK"
    CAD = "CAD"
    KWD = "KWD"
    NOK = "NOK"
    SAR = "SAR"
    JPY = "JPY"
    BGN = "BGN"
    RON = "RON"
    RUB = "RUB"
    IRR = "IRR"
    CNY = "CNY"
    PKR = "PKR"
    QAR = "QAR"
    KRW = "KRW"
    AZN = "AZN"
    AED = "AED"
    XDR = "XDR"

    @property
    def token(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class CurrencyCodes:
    """Ordered currency codes; duplicates are kept as given."""

    codes: tuple[CurrencyCode, ...] = ()

    def __post_init__(self) -> None:
        normalized = tuple(self.codes)
        for code in normalized:
            if not isinstance(code, CurrencyCode):
                raise TypeError("codes entries must be CurrencyCode")
        object.__setattr__(self, "codes", normalized)

    @classmethod
    def from_iterable(cls, codes: Iterable[CurrencyCode]) -> "CurrencyCodes":
        return cls(tuple(codes))

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[CurrencyCode]:
        return iter(self.codes)


@dataclass(slots=True, frozen=True)
class ExchangeType:
    """Which columns of the rate table to request.

    Forex rates use the ``A``/``S`` suffixes, banknote (effective) rates add
    ``EF``. The default selects forex buying only.
    """

    forex_buying: bool = True
    forex_selling: bool = False
    banknote_buying: bool = False
    banknote_selling: bool = False

    def __post_init__(self) -> None:
        flags = (self.forex_buying, self.forex_selling, self.banknote_buying, self.banknote_selling)
        if any(not isinstance(flag, bool) for flag in flags):
            raise TypeError("exchange type flags must be bool")
        if not any(flags):
            raise EvdsValidationError(ReturnError.INVALID_EXCHANGE_TYPE, field="exchange_type")

    @classmethod
    def new(cls) -> "ExchangeType":
        return cls()

    @classmethod
    def all(cls) -> "ExchangeType":
        return cls(
            forex_buying=True,
            forex_selling=True,
            banknote_buying=True,
            banknote_selling=True,
        )

    def suffixes(self) -> tuple[str, ...]:
        selected = (
            (self.forex_buying, "A"),
            (self.forex_selling, "S"),
            (self.banknote_buying, "A.EF"),
            (self.banknote_selling, "S.EF"),
        )
        return tuple(suffix for enabled, suffix in selected if enabled)


__all__ = [
    "CurrencyCode",
    "CurrencyCodes",
    "ExchangeType",
]
