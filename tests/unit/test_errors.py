from __future__ import annotations

import pytest

from evds_api_client.core.errors import (
    EvdsBoundaryError,
    EvdsError,
    EvdsResponseError,
    EvdsValidationError,
    ReturnError,
    classify_http_status,
)


def test_return_error_codes_are_unique():
    codes = [kind.code for kind in ReturnError]
    assert len(codes) == len(set(codes))


def test_return_error_categories_are_closed():
    assert {kind.category for kind in ReturnError} == {
        "format",
        "value",
        "emptiness",
        "compatibility",
        "boundary",
        "runtime",
    }


@pytest.mark.parametrize("kind", list(ReturnError))
def test_every_kind_renders_with_field_name(kind):
    message = kind.render(field="some_field", value="x")
    assert message.startswith("some_field ")


def test_error_exposes_kind_code_and_message():
    err = EvdsValidationError(ReturnError.INVALID_DATE_FORMAT, field="date", value="2020")
    assert isinstance(err, EvdsError)
    assert err.code == ReturnError.INVALID_DATE_FORMAT.code
    assert err.message == "date must be in DD-MM-YYYY format, got '2020'"
    assert str(err) == err.message


def test_error_message_is_stable():
    first = EvdsBoundaryError(ReturnError.INVALID_UTF8, field="api_key", value="invalid byte at offset 3")
    second = EvdsBoundaryError(ReturnError.INVALID_UTF8, field="api_key", value="invalid byte at offset 3")
    assert first.message == second.message


@pytest.mark.parametrize("http_status", [200, 204])
def test_classify_success_statuses(http_status):
    assert classify_http_status(http_status, endpoint="series") is None


@pytest.mark.parametrize("http_status", [301, 400, 403, 404, 500, 503, None])
def test_classify_non_success_statuses(http_status):
    err = classify_http_status(http_status, endpoint="categories")
    assert isinstance(err, EvdsResponseError)
    assert err.kind is ReturnError.RESPONSE_STATUS
    assert err.http_status == http_status
    assert err.field == "categories"
