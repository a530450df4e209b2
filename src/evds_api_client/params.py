"""Request parameter builders for EVDS endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .common import Evds
from .config import SERIES_SEPARATOR
from .core.models import KEY_PARAM, EvdsRequest
from .date import DatePreference, date_bounds
from .frequency_formulas import AdvancedProcesses

DATA_ENDPOINT = ""
CATEGORIES_ENDPOINT = "categories"
DATA_GROUPS_ENDPOINT = "datagroups"
SERIES_LIST_ENDPOINT = "serieList"


class DataGroupMode(Enum):
    ALL = 0
    CATEGORY = 1
    DATA_GROUP = 2


def build_date_params(preference: DatePreference) -> list[tuple[str, str]]:
    start, end = date_bounds(preference)
    return [("startDate", start.render()), ("endDate", end.render())]


def build_common_params(evds: Evds) -> list[tuple[str, str]]:
    return [("type", evds.return_format.token), (KEY_PARAM, evds.api_key.value)]


def build_series_request(
    series_codes: Sequence[str],
    preference: DatePreference,
    evds: Evds,
    *,
    processes: AdvancedProcesses | None = None,
) -> EvdsRequest:
    params = [("series", SERIES_SEPARATOR.join(series_codes))]
    params.extend(build_date_params(preference))
    if processes is not None:
        params.extend(processes.to_params(len(series_codes)))
    params.extend(build_common_params(evds))
    return EvdsRequest.build(DATA_ENDPOINT, params)


def build_data_group_request(
    data_group_code: str,
    preference: DatePreference,
    evds: Evds,
    *,
    processes: AdvancedProcesses | None = None,
) -> EvdsRequest:
    params = [("datagroup", data_group_code)]
    params.extend(build_date_params(preference))
    if processes is not None:
        params.extend(processes.to_params(1))
    params.extend(build_common_params(evds))
    return EvdsRequest.build(DATA_ENDPOINT, params)


def build_categories_request(evds: Evds) -> EvdsRequest:
    return EvdsRequest.build(CATEGORIES_ENDPOINT, build_common_params(evds))


def build_data_groups_request(
    mode: DataGroupMode,
    code: str | None,
    evds: Evds,
) -> EvdsRequest:
    params = [("mode", str(mode.value))]
    if mode is not DataGroupMode.ALL and code is not None:
        params.append(("code", code))
    params.extend(build_common_params(evds))
    return EvdsRequest.build(DATA_GROUPS_ENDPOINT, params)


def build_series_list_request(data_group_code: str, evds: Evds) -> EvdsRequest:
    params = [("code", data_group_code)]
    params.extend(build_common_params(evds))
    return EvdsRequest.build(SERIES_LIST_ENDPOINT, params)


__all__ = [
    "DATA_ENDPOINT",
    "CATEGORIES_ENDPOINT",
    "DATA_GROUPS_ENDPOINT",
    "SERIES_LIST_ENDPOINT",
    "DataGroupMode",
    "build_date_params",
    "build_common_params",
    "build_series_request",
    "build_data_group_request",
    "build_categories_request",
    "build_data_groups_request",
    "build_series_list_request",
]
