"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .basic.async_service import AsyncBasicService, AsyncRequestExecutor
from .client_shared import GuardedService, validate_client_config
from .config import EvdsClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import EvdsClientClosedError, ReturnError
from .currency.async_service import AsyncCurrencyService


class AsyncEvdsClient:
    """Public async EVDS client."""

    def __init__(
        self,
        *,
        config: EvdsClientConfig | None = None,
        transport: AsyncTransport | AsyncRequestExecutor | None = None,
    ) -> None:
        self._config = config or EvdsClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._closed = False
        self.basic = GuardedService(self, AsyncBasicService(self._transport))
        self.currency = GuardedService(self, AsyncCurrencyService(self._transport))

    def _ensure_open(self) -> None:
        if self._closed:
            raise EvdsClientClosedError(ReturnError.CLIENT_CLOSED, field="AsyncEvdsClient")

    async def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
        self._closed = True

    async def __aenter__(self) -> "AsyncEvdsClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncEvdsClient",
]
