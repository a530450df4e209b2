"""Currency series expressions and their requests."""

from __future__ import annotations

from dataclasses import dataclass

from ..basic.validators import ensure_series_count
from ..common import Evds
from ..config import SERIES_SEPARATOR
from ..core.errors import EvdsValidationError, ReturnError
from ..core.models import EvdsRequest
from ..date import DatePreference, date_bounds
from ..frequency_formulas import AdvancedProcesses
from ..params import build_series_request
from .codes import CurrencyCode, CurrencyCodes, ExchangeType

CURRENCY_SERIES_PREFIX = "TP.DK"
YTL_MARKER = "YTL"


def render_currency_codes(
    currency_code: CurrencyCode,
    exchange_type: ExchangeType,
    *,
    ytl_mode: bool,
) -> tuple[str, ...]:
    """Render ``TP.DK.<CODE>.<A|S>[.EF][.YTL]`` for each selected column.

    ``YTL`` selects values in the pre-2005 currency unit.
    """

    codes = []
    for suffix in exchange_type.suffixes():
        code = f"{CURRENCY_SERIES_PREFIX}.{currency_code.token}.{suffix}"
        if ytl_mode:
            code = f"{code}.{YTL_MARKER}"
        codes.append(code)
    return tuple(codes)


@dataclass(slots=True, frozen=True)
class CurrencySeries:
    exchange_type: ExchangeType
    currency_code: CurrencyCode
    date_preference: DatePreference
    ytl_mode: bool = False

    def __post_init__(self) -> None:
        # Fails with TypeError on anything but Date | DateRange.
        date_bounds(self.date_preference)

    def series_codes(self) -> tuple[str, ...]:
        return render_currency_codes(
            self.currency_code,
            self.exchange_type,
            ytl_mode=self.ytl_mode,
        )

    def series_expression(self) -> str:
        return SERIES_SEPARATOR.join(self.series_codes())

    def build_request(self, evds: Evds) -> EvdsRequest:
        return build_series_request(self.series_codes(), self.date_preference, evds)

    def build_advanced_request(self, evds: Evds, processes: AdvancedProcesses) -> EvdsRequest:
        processes.check_compatibility(self.date_preference)
        return build_series_request(
            self.series_codes(),
            self.date_preference,
            evds,
            processes=processes,
        )


@dataclass(slots=True, frozen=True)
class MultipleCurrencySeries:
    exchange_type: ExchangeType
    currency_codes: CurrencyCodes
    date_preference: DatePreference
    ytl_mode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.currency_codes, CurrencyCodes):
            object.__setattr__(self, "currency_codes", CurrencyCodes.from_iterable(self.currency_codes))
        date_bounds(self.date_preference)

    def series_codes(self) -> tuple[str, ...]:
        if len(self.currency_codes) == 0:
            raise EvdsValidationError(ReturnError.EMPTY_CURRENCY_CODES, field="currency_codes")
        codes: list[str] = []
        for currency_code in self.currency_codes:
            codes.extend(
                render_currency_codes(currency_code, self.exchange_type, ytl_mode=self.ytl_mode)
            )
        ensure_series_count(len(codes), field="currency_codes")
        return tuple(codes)

    def series_expression(self) -> str:
        return SERIES_SEPARATOR.join(self.series_codes())

    def build_multiple_request(self, evds: Evds) -> EvdsRequest:
        return build_series_request(self.series_codes(), self.date_preference, evds)


__all__ = [
    "CURRENCY_SERIES_PREFIX",
    "YTL_MARKER",
    "render_currency_codes",
    "CurrencySeries",
    "MultipleCurrencySeries",
]
