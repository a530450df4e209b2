from __future__ import annotations

import pytest

from evds_api_client.async_client import AsyncEvdsClient
from evds_api_client.config import EvdsClientConfig, TransportConfig
from evds_api_client.core.errors import (
    EvdsClientClosedError,
    EvdsValidationError,
    ReturnError,
)
from evds_api_client.currency import (
    CurrencyCode,
    CurrencySeries,
    ExchangeType,
    MultipleCurrencySeries,
)
from evds_api_client.date import Date, DateRange
from evds_api_client.frequency_formulas import AdvancedProcesses, DataFrequency, Formula
from evds_api_client.params import DataGroupMode
from tests.shared.client_fakes import DummyAsyncTransport

SINGLE = Date.from_text("13-12-2011")
RANGE = DateRange.from_text("13-12-2011", "13-12-2020")


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = DummyAsyncTransport()
    async with AsyncEvdsClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close(evds):
    transport = DummyAsyncTransport()
    client = AsyncEvdsClient(transport=transport)
    await client.close()
    await client.close()
    with pytest.raises(EvdsClientClosedError) as exc:
        await client.basic.get_categories(evds)
    assert exc.value.field == "AsyncEvdsClient"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_async_client_delegates_basic_methods(evds):
    transport = DummyAsyncTransport()
    async with AsyncEvdsClient(transport=transport) as client:
        data = await client.basic.get_data(["TP.DK.USD.A", "TP.DK.EUR.A"], RANGE, evds)
        advanced = await client.basic.get_advanced_data(
            "TP.DK.USD.A",
            RANGE,
            AdvancedProcesses(formula=Formula.PERCENTAGE_CHANGE, data_frequency=DataFrequency.ANNUAL),
            evds,
        )
        await client.basic.get_data_group("bie_dkdovytl", SINGLE, evds)
        await client.basic.get_advanced_data_group("bie_dkdovytl", RANGE, AdvancedProcesses(), evds)
        await client.basic.get_categories(evds)
        await client.basic.get_data_groups(DataGroupMode.ALL, None, evds)
        await client.basic.get_series_list("bie_dkdovytl", evds)

    assert data.json() == {"items": []}
    assert advanced.http_status == 200
    assert [request.endpoint for request in transport.requests] == [
        "",
        "",
        "",
        "",
        "categories",
        "datagroups",
        "serieList",
    ]
    assert transport.requests[0].param("series") == "TP.DK.USD.A-TP.DK.EUR.A"
    assert transport.requests[1].param("formulas") == "1"
    assert transport.requests[1].param("frequency") == "8"


@pytest.mark.asyncio
async def test_async_client_delegates_currency_methods(evds):
    transport = DummyAsyncTransport()
    exchange = ExchangeType(forex_buying=True, forex_selling=True)
    async with AsyncEvdsClient(transport=transport) as client:
        await client.currency.get_data(CurrencySeries(exchange, CurrencyCode.GBP, SINGLE), evds)
        await client.currency.get_advanced_data(
            CurrencySeries(exchange, CurrencyCode.GBP, RANGE),
            evds,
            AdvancedProcesses(data_frequency=DataFrequency.MONTHLY),
        )
        await client.currency.get_multiple_data(
            MultipleCurrencySeries(exchange, [CurrencyCode.USD, CurrencyCode.JPY], SINGLE),
            evds,
        )

    assert [request.param("series") for request in transport.requests] == [
        "TP.DK.GBP.A-TP.DK.GBP.S",
        "TP.DK.GBP.A-TP.DK.GBP.S",
        "TP.DK.USD.A-TP.DK.USD.S-TP.DK.JPY.A-TP.DK.JPY.S",
    ]
    assert transport.requests[1].param("aggregationTypes") == "avg-avg"


@pytest.mark.asyncio
async def test_async_client_validation_errors_do_not_reach_transport(evds):
    transport = DummyAsyncTransport()
    async with AsyncEvdsClient(transport=transport) as client:
        with pytest.raises(EvdsValidationError) as exc:
            await client.currency.get_advanced_data(
                CurrencySeries(ExchangeType.new(), CurrencyCode.USD, SINGLE),
                evds,
                AdvancedProcesses(data_frequency=DataFrequency.WEEKLY),
            )
    assert exc.value.kind is ReturnError.INCOMPATIBLE_ADVANCED_PROCESS
    assert transport.requests == []


def test_async_client_rejects_invalid_config():
    config = EvdsClientConfig(transport=TransportConfig(timeout_read_seconds=0))
    with pytest.raises(EvdsValidationError) as exc:
        AsyncEvdsClient(config=config, transport=DummyAsyncTransport())
    assert exc.value.kind is ReturnError.INVALID_CONFIG
