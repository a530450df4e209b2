"""Basic EVDS operations bound to an async transport."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..common import Evds
from ..core.models import EvdsRequest, EvdsResponse
from ..date import DatePreference
from ..frequency_formulas import AdvancedProcesses
from ..params import DataGroupMode
from .shared import (
    prepare_advanced_data_request,
    prepare_categories_request,
    prepare_data_group_request,
    prepare_data_groups_request,
    prepare_data_request,
    prepare_series_list_request,
)


class AsyncRequestExecutor(Protocol):
    async def request(self, request: EvdsRequest) -> EvdsResponse: ...


class AsyncBasicService:
    """Async counterpart of :class:`BasicService`."""

    def __init__(self, transport: AsyncRequestExecutor) -> None:
        self._transport = transport

    async def get_data(
        self,
        series: str | Sequence[str],
        date_preference: DatePreference,
        evds: Evds,
    ) -> EvdsResponse:
        return await self._transport.request(prepare_data_request(series, date_preference, evds))

    async def get_advanced_data(
        self,
        series: str | Sequence[str],
        date_preference: DatePreference,
        processes: AdvancedProcesses,
        evds: Evds,
    ) -> EvdsResponse:
        request = prepare_advanced_data_request(series, date_preference, processes, evds)
        return await self._transport.request(request)

    async def get_data_group(
        self,
        data_group_code: str,
        date_preference: DatePreference,
        evds: Evds,
    ) -> EvdsResponse:
        request = prepare_data_group_request(data_group_code, date_preference, evds)
        return await self._transport.request(request)

    async def get_advanced_data_group(
        self,
        data_group_code: str,
        date_preference: DatePreference,
        processes: AdvancedProcesses,
        evds: Evds,
    ) -> EvdsResponse:
        request = prepare_data_group_request(
            data_group_code,
            date_preference,
            evds,
            processes=processes,
        )
        return await self._transport.request(request)

    async def get_categories(self, evds: Evds) -> EvdsResponse:
        return await self._transport.request(prepare_categories_request(evds))

    async def get_data_groups(
        self,
        mode: DataGroupMode,
        code: str | None,
        evds: Evds,
    ) -> EvdsResponse:
        return await self._transport.request(prepare_data_groups_request(mode, code, evds))

    async def get_series_list(self, data_group_code: str, evds: Evds) -> EvdsResponse:
        request = prepare_series_list_request(data_group_code, evds)
        return await self._transport.request(request)


__all__ = [
    "AsyncBasicService",
]
