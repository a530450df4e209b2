"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .basic.service import BasicService, RequestExecutor
from .client_shared import GuardedService, validate_client_config
from .config import EvdsClientConfig
from .core.errors import EvdsClientClosedError, ReturnError
from .core.transport import SyncTransport
from .currency.service import CurrencyService


class EvdsClient:
    """Public EVDS client.

    ``basic`` serves series, data group and catalogue requests and
    ``currency`` serves the ``TP.DK`` currency tables.
    """

    def __init__(
        self,
        *,
        config: EvdsClientConfig | None = None,
        transport: SyncTransport | RequestExecutor | None = None,
    ) -> None:
        self._config = config or EvdsClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        self.basic = GuardedService(self, BasicService(self._transport))
        self.currency = GuardedService(self, CurrencyService(self._transport))

    def _ensure_open(self) -> None:
        if self._closed:
            raise EvdsClientClosedError(ReturnError.CLIENT_CLOSED, field="EvdsClient")

    def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()
        self._closed = True

    def __enter__(self) -> "EvdsClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "EvdsClient",
]
