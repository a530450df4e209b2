"""Error taxonomy and status mapping."""

from __future__ import annotations

from enum import Enum


class ReturnError(Enum):
    """Closed set of failure kinds.

    Each member carries a stable numeric code (exposed across the boundary
    layer), a category and a message template naming the offending field.
    """

    INVALID_DATE_FORMAT = (1, "format", "{field} must be in DD-MM-YYYY format, got {value!r}")
    INVALID_SERIES_FORMAT = (2, "format", "{field} contains an invalid series code: {value!r}")
    INVALID_API_KEY_CHARACTERS = (
        3,
        "format",
        "{field} must contain only ASCII letters and digits",
    )
    INVALID_CODE = (4, "format", "{field} contains an invalid code: {value!r}")
    INVALID_DATE_VALUE = (10, "value", "{field} is not a valid calendar date: {value!r}")
    INVALID_DATE_RANGE = (11, "value", "{field} start date is after end date: {value}")
    INVALID_API_KEY_LENGTH = (12, "value", "{field} has invalid length: {value}")
    TOO_MANY_SERIES = (13, "value", "{field} exceeds the maximum series count: {value}")
    INVALID_EXCHANGE_TYPE = (14, "value", "{field} must select at least one exchange column")
    INVALID_CONFIG = (15, "value", "{field} is invalid: {value}")
    EMPTY_SERIES = (20, "emptiness", "{field} must not be empty")
    EMPTY_CURRENCY_CODES = (21, "emptiness", "{field} must contain at least one currency code")
    INCOMPATIBLE_ADVANCED_PROCESS = (
        30,
        "compatibility",
        "{field} is not supported for the requested date preference: {value}",
    )
    INVALID_UTF8 = (40, "boundary", "{field} is not valid UTF-8: {value}")
    BUFFER_ALLOCATION = (41, "boundary", "{field} buffer could not be allocated: {value}")
    UNKNOWN_BUFFER = (42, "boundary", "{field} refers to an unknown or released buffer: {value}")
    REQUEST_FAILED = (50, "runtime", "{field} request failed: {value}")
    RESPONSE_STATUS = (51, "runtime", "{field} returned unexpected HTTP status: {value}")
    CLIENT_CLOSED = (52, "runtime", "{field} is already closed")

    def __init__(self, code: int, category: str, template: str) -> None:
        self.code = code
        self.category = category
        self.template = template

    def render(self, *, field: str, value: object = None) -> str:
        return self.template.format(field=field, value=value)


class EvdsError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        kind: ReturnError,
        *,
        field: str,
        value: object = None,
        http_status: int | None = None,
    ) -> None:
        super().__init__(kind.render(field=field, value=value))
        self.kind = kind
        self.field = field
        self.value = value
        self.http_status = http_status

    @property
    def code(self) -> int:
        return self.kind.code

    @property
    def message(self) -> str:
        return str(self)


class EvdsValidationError(EvdsError):
    """Invalid input rejected before any request is made."""


class EvdsBoundaryError(EvdsError):
    """Failure while marshalling text across the external buffer boundary."""


class EvdsTransportError(EvdsError):
    """Network/transport-level failure."""


class EvdsResponseError(EvdsError):
    """Service answered with a non-success HTTP status."""


class EvdsClientClosedError(EvdsError):
    """Raised when client is used after close."""


def classify_http_status(http_status: int | None, *, endpoint: str) -> EvdsError | None:
    """Map an HTTP status to a domain exception, ``None`` on success."""

    if http_status is not None and 200 <= http_status < 300:
        return None
    return EvdsResponseError(
        ReturnError.RESPONSE_STATUS,
        field=endpoint,
        value=http_status,
        http_status=http_status,
    )


__all__ = [
    "ReturnError",
    "EvdsError",
    "EvdsValidationError",
    "EvdsBoundaryError",
    "EvdsTransportError",
    "EvdsResponseError",
    "EvdsClientClosedError",
    "classify_http_status",
]
