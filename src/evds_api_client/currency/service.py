"""Currency operations bound to a sync transport."""

from __future__ import annotations

from ..basic.service import RequestExecutor
from ..common import Evds
from ..core.models import EvdsResponse
from ..frequency_formulas import AdvancedProcesses
from .series import CurrencySeries, MultipleCurrencySeries


class CurrencyService:
    def __init__(self, transport: RequestExecutor) -> None:
        self._transport = transport

    def get_data(self, series: CurrencySeries, evds: Evds) -> EvdsResponse:
        return self._transport.request(series.build_request(evds))

    def get_advanced_data(
        self,
        series: CurrencySeries,
        evds: Evds,
        processes: AdvancedProcesses,
    ) -> EvdsResponse:
        return self._transport.request(series.build_advanced_request(evds, processes))

    def get_multiple_data(self, series: MultipleCurrencySeries, evds: Evds) -> EvdsResponse:
        return self._transport.request(series.build_multiple_request(evds))


__all__ = [
    "CurrencyService",
]
