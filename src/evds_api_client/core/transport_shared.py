"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx

from ..common import ReturnFormat
from ..config import EvdsClientConfig
from .errors import classify_http_status
from .models import KEY_PARAM, EvdsRequest, EvdsResponse


class RawResponse(Protocol):
    status_code: int
    content: bytes


def build_default_headers(config: EvdsClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: EvdsClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_base_url(config: EvdsClientConfig) -> str:
    return config.base_url.rstrip("/") + "/"


def prepare_call(
    config: EvdsClientConfig,
    request: EvdsRequest,
) -> tuple[str, dict[str, str]]:
    """Return the relative path and per-request headers."""

    if not config.send_key_header:
        return request.to_path(), {}
    key = request.param(KEY_PARAM)
    headers = {KEY_PARAM: key} if key is not None else {}
    return request.without_param(KEY_PARAM).to_path(), headers


def resolve_return_format(request: EvdsRequest) -> ReturnFormat:
    token = request.param("type")
    return ReturnFormat(token) if token is not None else ReturnFormat.JSON


def build_response(raw: RawResponse, request: EvdsRequest) -> EvdsResponse:
    http_status = getattr(raw, "status_code", None)
    mapped_error = classify_http_status(http_status, endpoint=request.endpoint or "series")
    if mapped_error is not None:
        raise mapped_error
    return EvdsResponse(
        content=bytes(getattr(raw, "content", b"")),
        http_status=http_status,  # type: ignore[arg-type]
        return_format=resolve_return_format(request),
        endpoint=request.endpoint,
    )


__all__ = [
    "RawResponse",
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "prepare_call",
    "resolve_return_format",
    "build_response",
]
