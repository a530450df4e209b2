"""Async HTTP transport returning raw payload bytes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import EvdsClientConfig
from .errors import EvdsError, EvdsTransportError, ReturnError
from .models import EvdsRequest, EvdsResponse
from .transport_shared import (
    RawResponse,
    build_default_headers,
    build_default_timeout,
    build_response,
    normalize_base_url,
    prepare_call,
)

logger = logging.getLogger("evds_api_client")


class AsyncTransportClient(Protocol):
    async def get(self, url: str, *, headers: Mapping[str, str]) -> RawResponse: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for EVDS web services."""

    def __init__(
        self,
        config: EvdsClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=normalize_base_url(config),
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, request: EvdsRequest) -> EvdsResponse:
        if self._closed:
            raise EvdsTransportError(
                ReturnError.REQUEST_FAILED,
                field="transport",
                value="transport is already closed",
            )

        path, headers = prepare_call(self._config, request)
        log_path = request.to_log_path()
        logger.debug("request start path=%s", log_path)
        try:
            raw = await self._client.get(path, headers=headers)
        except Exception as exc:
            logger.error(
                "request network error path=%s error=%s",
                log_path,
                exc.__class__.__name__,
            )
            raise EvdsTransportError(
                ReturnError.REQUEST_FAILED,
                field=request.endpoint or "series",
                value=exc.__class__.__name__,
            ) from exc

        try:
            response = build_response(raw, request)
        except EvdsError as exc:
            logger.error("request failed path=%s http_status=%s", log_path, exc.http_status)
            raise
        logger.info("request success path=%s bytes=%s", log_path, len(response.content))
        return response


__all__ = [
    "AsyncTransport",
]
