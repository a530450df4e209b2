"""Syntactic validation of series and data group codes."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..config import MAX_SERIES_COUNT, SERIES_SEPARATOR
from ..core.errors import EvdsValidationError, ReturnError
from ..params import DataGroupMode

_SERIES_CODE_PATTERN = re.compile(r"[A-Za-z0-9_]+(?:\.[A-Za-z0-9_]+)+")
_CODE_PATTERN = re.compile(r"[A-Za-z0-9_.]+")


def _split_series(series: str | Sequence[str], *, field: str) -> list[str]:
    if isinstance(series, str):
        text = series.strip()
        if text == "":
            raise EvdsValidationError(ReturnError.EMPTY_SERIES, field=field)
        return [part.strip() for part in text.split(SERIES_SEPARATOR)]
    if not isinstance(series, Sequence):
        raise TypeError("series must be str or Sequence[str]")
    parts: list[str] = []
    for code in series:
        if not isinstance(code, str):
            raise TypeError("series entries must be str")
        parts.append(code.strip())
    if not parts:
        raise EvdsValidationError(ReturnError.EMPTY_SERIES, field=field)
    return parts


def validate_series(series: str | Sequence[str], *, field: str = "series") -> tuple[str, ...]:
    """Validate ``TP.DK.USD.A-TP.DK.EUR.A`` style input and return its codes.

    Only the shape is checked; whether a code exists is up to the service.
    """

    codes = _split_series(series, field=field)
    for code in codes:
        if not _SERIES_CODE_PATTERN.fullmatch(code):
            raise EvdsValidationError(ReturnError.INVALID_SERIES_FORMAT, field=field, value=code)
    ensure_series_count(len(codes), field=field)
    return tuple(codes)


def ensure_series_count(count: int, *, field: str = "series") -> None:
    if count > MAX_SERIES_COUNT:
        raise EvdsValidationError(
            ReturnError.TOO_MANY_SERIES,
            field=field,
            value=f"{count} > {MAX_SERIES_COUNT}",
        )


def validate_code(code: str, *, field: str) -> str:
    if not isinstance(code, str):
        raise EvdsValidationError(ReturnError.INVALID_CODE, field=field, value=code)
    text = code.strip()
    if not _CODE_PATTERN.fullmatch(text):
        raise EvdsValidationError(ReturnError.INVALID_CODE, field=field, value=code)
    return text


def validate_data_groups_selector(mode: DataGroupMode, code: str | None) -> str | None:
    if not isinstance(mode, DataGroupMode):
        raise TypeError("mode must be DataGroupMode")
    if mode is DataGroupMode.ALL:
        return None
    return validate_code(code, field="code")  # type: ignore[arg-type]


__all__ = [
    "validate_series",
    "ensure_series_count",
    "validate_code",
    "validate_data_groups_selector",
]
