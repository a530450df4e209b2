"""Result-returning entry points for callers outside Python.

Every string parameter arrives as an ``ExternalBuffer`` and every call
returns a ``BoundaryResult`` instead of raising ``EvdsError``. Successful
results carry an ``OwnedBuffer`` that must be passed to ``release`` once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import TracebackType

from ..client import EvdsClient
from ..common import ApiKey, Evds, ReturnFormat
from ..core.errors import EvdsError
from ..core.models import EvdsResponse
from ..currency.codes import CurrencyCode, CurrencyCodes, ExchangeType
from ..currency.series import CurrencySeries, MultipleCurrencySeries
from ..date import parse_date_preference
from ..frequency_formulas import AdvancedProcesses, AggregationType, DataFrequency, Formula
from ..params import DataGroupMode
from .buffers import BufferPool, ExternalBuffer, OwnedBuffer, read_text
from .text import to_ascii

logger = logging.getLogger("evds_api_client")


@dataclass(slots=True, frozen=True)
class BoundaryResult:
    """Either a response buffer or an error code with its message."""

    buffer: OwnedBuffer | None = None
    error_code: int = 0
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.buffer is not None

    @classmethod
    def success(cls, buffer: OwnedBuffer) -> "BoundaryResult":
        return cls(buffer=buffer)

    @classmethod
    def failure(cls, error: EvdsError) -> "BoundaryResult":
        return cls(buffer=None, error_code=error.code, error_message=error.message)


def _evds(api_key: ExternalBuffer, return_format: ReturnFormat) -> Evds:
    return Evds(
        api_key=ApiKey.from_text(read_text(api_key, field="api_key")),
        return_format=return_format,
    )


class EvdsBoundary:
    """Boundary facade over a sync :class:`EvdsClient`."""

    def __init__(
        self,
        client: EvdsClient | None = None,
        *,
        pool: BufferPool | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or EvdsClient()
        self.pool = pool or BufferPool()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "EvdsBoundary":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def release(self, buffer: OwnedBuffer | int) -> None:
        self.pool.release(buffer)

    def get_data(
        self,
        data_series: ExternalBuffer,
        date: ExternalBuffer,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_data(
                read_text(data_series, field="data_series"),
                parse_date_preference(read_text(date, field="date")),
                _evds(api_key, return_format),
            )

        return self._run("get_data", call, ascii_mode=ascii_mode)

    def get_advanced_data(
        self,
        data_series: ExternalBuffer,
        date: ExternalBuffer,
        aggregation_type: AggregationType,
        formula: Formula,
        data_frequency: DataFrequency,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_advanced_data(
                read_text(data_series, field="data_series"),
                parse_date_preference(read_text(date, field="date")),
                AdvancedProcesses(aggregation_type, formula, data_frequency),
                _evds(api_key, return_format),
            )

        return self._run("get_advanced_data", call, ascii_mode=ascii_mode)

    def get_currency_data(
        self,
        exchange_type: ExchangeType,
        currency_code: CurrencyCode,
        date: ExternalBuffer,
        ytl_mode: bool,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            series = CurrencySeries(
                exchange_type,
                currency_code,
                parse_date_preference(read_text(date, field="date")),
                ytl_mode,
            )
            return self._client.currency.get_data(series, _evds(api_key, return_format))

        return self._run("get_currency_data", call, ascii_mode=ascii_mode)

    def get_advanced_currency_data(
        self,
        exchange_type: ExchangeType,
        currency_code: CurrencyCode,
        date: ExternalBuffer,
        ytl_mode: bool,
        aggregation_type: AggregationType,
        formula: Formula,
        data_frequency: DataFrequency,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            series = CurrencySeries(
                exchange_type,
                currency_code,
                parse_date_preference(read_text(date, field="date")),
                ytl_mode,
            )
            return self._client.currency.get_advanced_data(
                series,
                _evds(api_key, return_format),
                AdvancedProcesses(aggregation_type, formula, data_frequency),
            )

        return self._run("get_advanced_currency_data", call, ascii_mode=ascii_mode)

    def get_multiple_currency_data(
        self,
        exchange_type: ExchangeType,
        currency_codes: Sequence[CurrencyCode],
        date: ExternalBuffer,
        ytl_mode: bool,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            series = MultipleCurrencySeries(
                exchange_type,
                CurrencyCodes.from_iterable(currency_codes),
                parse_date_preference(read_text(date, field="date")),
                ytl_mode,
            )
            return self._client.currency.get_multiple_data(series, _evds(api_key, return_format))

        return self._run("get_multiple_currency_data", call, ascii_mode=ascii_mode)

    def get_data_group(
        self,
        data_group: ExternalBuffer,
        date: ExternalBuffer,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_data_group(
                read_text(data_group, field="data_group"),
                parse_date_preference(read_text(date, field="date")),
                _evds(api_key, return_format),
            )

        return self._run("get_data_group", call, ascii_mode=ascii_mode)

    def get_categories(
        self,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_categories(_evds(api_key, return_format))

        return self._run("get_categories", call, ascii_mode=ascii_mode)

    def get_data_groups(
        self,
        mode: DataGroupMode,
        code: ExternalBuffer | None,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_data_groups(
                mode,
                read_text(code, field="code") if code is not None else None,
                _evds(api_key, return_format),
            )

        return self._run("get_data_groups", call, ascii_mode=ascii_mode)

    def get_series_list(
        self,
        data_group: ExternalBuffer,
        api_key: ExternalBuffer,
        return_format: ReturnFormat,
        ascii_mode: bool = False,
    ) -> BoundaryResult:
        def call() -> EvdsResponse:
            return self._client.basic.get_series_list(
                read_text(data_group, field="data_group"),
                _evds(api_key, return_format),
            )

        return self._run("get_series_list", call, ascii_mode=ascii_mode)

    def _run(
        self,
        operation: str,
        call: Callable[[], EvdsResponse],
        *,
        ascii_mode: bool,
    ) -> BoundaryResult:
        try:
            response = call()
            return BoundaryResult.success(self._marshal(response, ascii_mode=ascii_mode))
        except EvdsError as exc:
            logger.warning(
                "boundary call failed operation=%s code=%s kind=%s",
                operation,
                exc.code,
                exc.kind.name,
            )
            return BoundaryResult.failure(exc)

    def _marshal(self, response: EvdsResponse, *, ascii_mode: bool) -> OwnedBuffer:
        if not ascii_mode:
            return self.pool.allocate(response.content)
        # Undecodable bytes become U+FFFD, which to_ascii turns into the placeholder.
        text = response.content.decode("utf-8", errors="replace")
        return self.pool.allocate_text(to_ascii(text))


__all__ = [
    "BoundaryResult",
    "EvdsBoundary",
]
