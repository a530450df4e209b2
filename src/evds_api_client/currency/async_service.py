"""Currency operations bound to an async transport."""

from __future__ import annotations

from ..basic.async_service import AsyncRequestExecutor
from ..common import Evds
from ..core.models import EvdsResponse
from ..frequency_formulas import AdvancedProcesses
from .series import CurrencySeries, MultipleCurrencySeries


class AsyncCurrencyService:
    def __init__(self, transport: AsyncRequestExecutor) -> None:
        self._transport = transport

    async def get_data(self, series: CurrencySeries, evds: Evds) -> EvdsResponse:
        return await self._transport.request(series.build_request(evds))

    async def get_advanced_data(
        self,
        series: CurrencySeries,
        evds: Evds,
        processes: AdvancedProcesses,
    ) -> EvdsResponse:
        return await self._transport.request(series.build_advanced_request(evds, processes))

    async def get_multiple_data(
        self,
        series: MultipleCurrencySeries,
        evds: Evds,
    ) -> EvdsResponse:
        return await self._transport.request(series.build_multiple_request(evds))


__all__ = [
    "AsyncCurrencyService",
]
