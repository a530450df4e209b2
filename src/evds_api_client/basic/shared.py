"""Shared request preparation for sync/async basic services."""

from __future__ import annotations

from collections.abc import Sequence

from ..common import Evds
from ..core.models import EvdsRequest
from ..date import DatePreference
from ..frequency_formulas import AdvancedProcesses
from ..params import (
    DataGroupMode,
    build_categories_request,
    build_data_group_request,
    build_data_groups_request,
    build_series_list_request,
    build_series_request,
)
from .validators import validate_code, validate_data_groups_selector, validate_series


def prepare_data_request(
    series: str | Sequence[str],
    preference: DatePreference,
    evds: Evds,
) -> EvdsRequest:
    codes = validate_series(series)
    return build_series_request(codes, preference, evds)


def prepare_advanced_data_request(
    series: str | Sequence[str],
    preference: DatePreference,
    processes: AdvancedProcesses,
    evds: Evds,
) -> EvdsRequest:
    codes = validate_series(series)
    processes.check_compatibility(preference)
    return build_series_request(codes, preference, evds, processes=processes)


def prepare_data_group_request(
    data_group_code: str,
    preference: DatePreference,
    evds: Evds,
    *,
    processes: AdvancedProcesses | None = None,
) -> EvdsRequest:
    code = validate_code(data_group_code, field="data_group")
    if processes is not None:
        processes.check_compatibility(preference)
    return build_data_group_request(code, preference, evds, processes=processes)


def prepare_categories_request(evds: Evds) -> EvdsRequest:
    return build_categories_request(evds)


def prepare_data_groups_request(
    mode: DataGroupMode,
    code: str | None,
    evds: Evds,
) -> EvdsRequest:
    return build_data_groups_request(mode, validate_data_groups_selector(mode, code), evds)


def prepare_series_list_request(data_group_code: str, evds: Evds) -> EvdsRequest:
    code = validate_code(data_group_code, field="data_group")
    return build_series_list_request(code, evds)


__all__ = [
    "prepare_data_request",
    "prepare_advanced_data_request",
    "prepare_data_group_request",
    "prepare_categories_request",
    "prepare_data_groups_request",
    "prepare_series_list_request",
]
