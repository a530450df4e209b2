"""Outbound request and raw response models."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import quote

from ..common import ReturnFormat

KEY_PARAM = "key"
_SAFE_CHARS = "-._,~"
_KEY_MASK = "***"


@dataclass(slots=True, frozen=True)
class EvdsRequest:
    """Fully assembled query, ready for a transport.

    EVDS reads parameters from the path (``series=...&type=json``) rather
    than from a ``?`` query string, so ``params`` keeps insertion order.
    """

    endpoint: str
    params: tuple[tuple[str, str], ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def build(cls, endpoint: str, params: Iterable[tuple[str, str]]) -> "EvdsRequest":
        return cls(endpoint=endpoint, params=tuple(params))

    def param(self, name: str) -> str | None:
        for key, value in self.params:
            if key == name:
                return value
        return None

    def without_param(self, name: str) -> "EvdsRequest":
        return EvdsRequest(
            endpoint=self.endpoint,
            params=tuple((key, value) for key, value in self.params if key != name),
        )

    def to_path(self) -> str:
        return self._join(
            f"{key}={quote(value, safe=_SAFE_CHARS)}" for key, value in self.params
        )

    def to_log_path(self) -> str:
        # The mask is written literally, never percent-encoded.
        return self._join(
            f"{key}={_KEY_MASK if key == KEY_PARAM else quote(value, safe=_SAFE_CHARS)}"
            for key, value in self.params
        )

    def _join(self, pairs: Iterable[str]) -> str:
        query = "&".join(pairs)
        endpoint = self.endpoint.strip("/")
        if not endpoint:
            return query
        return f"{endpoint}/{query}" if query else endpoint

    def __repr__(self) -> str:
        return f"EvdsRequest(path={self.to_log_path()!r})"


@dataclass(slots=True, frozen=True)
class EvdsResponse:
    """Raw payload bytes in the requested return format."""

    content: bytes
    http_status: int
    return_format: ReturnFormat
    endpoint: str = ""

    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> object:
        if self.return_format is not ReturnFormat.JSON:
            raise TypeError(f"response format is {self.return_format.token}, not json")
        return json.loads(self.content)


__all__ = [
    "KEY_PARAM",
    "EvdsRequest",
    "EvdsResponse",
]
