"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .config import EvdsClientConfig
from .core.errors import EvdsValidationError, ReturnError


class _Owner(Protocol):
    def _ensure_open(self) -> None: ...


def validate_client_config(config: EvdsClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise EvdsValidationError(ReturnError.INVALID_CONFIG, field="config", value=str(exc)) from exc


class GuardedService:
    """Guard wrapper to block usage after client close.

    The open check runs when a method is called, before any coroutine is
    created, so sync and async delegates share it.
    """

    def __init__(self, owner: _Owner, delegate: object) -> None:
        self._owner = owner
        self._delegate = delegate

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._delegate, name)
        if name.startswith("_") or not callable(attr):
            return attr
        return self._guard(attr)

    def _guard(self, method: Callable[..., Any]) -> Callable[..., Any]:
        def guarded(*args: Any, **kwargs: Any) -> Any:
            self._owner._ensure_open()
            return method(*args, **kwargs)

        guarded.__name__ = getattr(method, "__name__", "guarded")
        guarded.__doc__ = getattr(method, "__doc__", None)
        return guarded


__all__ = [
    "validate_client_config",
    "GuardedService",
]
