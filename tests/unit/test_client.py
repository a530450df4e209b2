from __future__ import annotations

import pytest

from evds_api_client.client import EvdsClient
from evds_api_client.config import EvdsClientConfig
from evds_api_client.core.errors import EvdsClientClosedError, EvdsValidationError, ReturnError
from evds_api_client.currency import CurrencyCode, CurrencyCodes, CurrencySeries, ExchangeType, MultipleCurrencySeries
from evds_api_client.date import Date, DateRange
from evds_api_client.frequency_formulas import (
    AdvancedProcesses,
    AggregationType,
    DataFrequency,
    Formula,
)
from evds_api_client.params import DataGroupMode
from tests.shared.client_fakes import DummyTransport

SINGLE = Date.from_text("13-12-2011")
RANGE = DateRange.from_text("13-12-2011", "13-12-2020")


def test_client_context_manager_closes_transport():
    transport = DummyTransport()
    with EvdsClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


def test_client_raises_when_used_after_close(evds):
    transport = DummyTransport()
    client = EvdsClient(transport=transport)
    client.close()
    with pytest.raises(EvdsClientClosedError) as exc:
        client.basic.get_data("TP.DK.USD.A", SINGLE, evds)
    assert exc.value.kind is ReturnError.CLIENT_CLOSED
    with pytest.raises(EvdsClientClosedError):
        client.currency.get_data(CurrencySeries(ExchangeType.new(), CurrencyCode.USD, SINGLE), evds)
    assert transport.requests == []


def test_client_close_is_idempotent():
    transport = DummyTransport()
    client = EvdsClient(transport=transport)
    client.close()
    client.close()
    assert transport.closed is True


def test_client_rejects_invalid_config():
    with pytest.raises(EvdsValidationError) as exc:
        EvdsClient(config=EvdsClientConfig(base_url=""), transport=DummyTransport())
    assert exc.value.kind is ReturnError.INVALID_CONFIG


def test_client_basic_operations_build_expected_requests(evds):
    transport = DummyTransport()
    processes = AdvancedProcesses(AggregationType.AVERAGE, Formula.LEVEL, DataFrequency.MONTHLY)
    with EvdsClient(transport=transport) as client:
        response = client.basic.get_data("TP.DK.USD.A-TP.DK.EUR.A", RANGE, evds)
        client.basic.get_advanced_data("TP.DK.USD.A", RANGE, processes, evds)
        client.basic.get_data_group("bie_dkdovytl", SINGLE, evds)
        client.basic.get_advanced_data_group("bie_dkdovytl", RANGE, processes, evds)
        client.basic.get_categories(evds)
        client.basic.get_data_groups(DataGroupMode.DATA_GROUP, "bie_dkdovytl", evds)
        client.basic.get_series_list("bie_dkdovytl", evds)

    assert response.http_status == 200
    assert response.json() == {"items": []}
    paths = [request.to_log_path() for request in transport.requests]
    assert paths == [
        "series=TP.DK.USD.A-TP.DK.EUR.A&startDate=13-12-2011&endDate=13-12-2020&type=json&key=***",
        "series=TP.DK.USD.A&startDate=13-12-2011&endDate=13-12-2020"
        "&aggregationTypes=avg&formulas=0&frequency=5&type=json&key=***",
        "datagroup=bie_dkdovytl&startDate=13-12-2011&endDate=13-12-2011&type=json&key=***",
        "datagroup=bie_dkdovytl&startDate=13-12-2011&endDate=13-12-2020"
        "&aggregationTypes=avg&formulas=0&frequency=5&type=json&key=***",
        "categories/type=json&key=***",
        "datagroups/mode=2&code=bie_dkdovytl&type=json&key=***",
        "serieList/code=bie_dkdovytl&type=json&key=***",
    ]


def test_client_validation_errors_happen_before_transport(evds):
    transport = DummyTransport()
    with EvdsClient(transport=transport) as client:
        with pytest.raises(EvdsValidationError) as exc:
            client.basic.get_data("", SINGLE, evds)
        assert exc.value.kind is ReturnError.EMPTY_SERIES

        with pytest.raises(EvdsValidationError) as exc:
            client.basic.get_advanced_data(
                "TP.DK.USD.A",
                SINGLE,
                AdvancedProcesses(formula=Formula.MOVING_SUM),
                evds,
            )
        assert exc.value.kind is ReturnError.INCOMPATIBLE_ADVANCED_PROCESS

        with pytest.raises(EvdsValidationError) as exc:
            client.currency.get_multiple_data(
                MultipleCurrencySeries(ExchangeType.new(), CurrencyCodes(), SINGLE),
                evds,
            )
        assert exc.value.kind is ReturnError.EMPTY_CURRENCY_CODES

    assert transport.requests == []


def test_client_currency_operations(evds):
    transport = DummyTransport()
    series = CurrencySeries(ExchangeType.new(), CurrencyCode.USD, RANGE, True)
    multiple = MultipleCurrencySeries(
        ExchangeType.new(),
        CurrencyCodes((CurrencyCode.USD, CurrencyCode.EUR)),
        RANGE,
    )
    with EvdsClient(transport=transport) as client:
        client.currency.get_data(series, evds)
        client.currency.get_advanced_data(
            series,
            evds,
            AdvancedProcesses(AggregationType.END, Formula.LEVEL, DataFrequency.ANNUAL),
        )
        client.currency.get_multiple_data(multiple, evds)

    assert [request.param("series") for request in transport.requests] == [
        "TP.DK.USD.A.YTL",
        "TP.DK.USD.A.YTL",
        "TP.DK.USD.A-TP.DK.EUR.A",
    ]
    assert transport.requests[1].param("frequency") == "8"
