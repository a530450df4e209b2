"""Length-annotated buffers exchanged with external callers.

Callers hand text in as ``ExternalBuffer`` (bytes plus an explicit length)
and receive ``OwnedBuffer`` results from a ``BufferPool``. Every owned buffer
must be released exactly once through the pool that issued it.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass

from ..core.errors import EvdsBoundaryError, ReturnError


@dataclass(slots=True, frozen=True)
class ExternalBuffer:
    """Caller-owned bytes; only the first ``length`` bytes are meaningful."""

    data: bytes
    length: int

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise TypeError("length must be int")
        if not 0 <= self.length <= len(self.data):
            raise EvdsBoundaryError(
                ReturnError.BUFFER_ALLOCATION,
                field="buffer",
                value=f"length {self.length} outside 0..{len(self.data)}",
            )

    @classmethod
    def from_text(cls, text: str) -> "ExternalBuffer":
        data = text.encode("utf-8")
        return cls(data=data, length=len(data))

    def view(self) -> bytes:
        return self.data[: self.length]


def read_text(buffer: ExternalBuffer, *, field: str) -> str:
    """Decode exactly ``buffer.length`` bytes as UTF-8."""

    try:
        return buffer.view().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EvdsBoundaryError(
            ReturnError.INVALID_UTF8,
            field=field,
            value=f"invalid byte at offset {exc.start}",
        ) from exc


@dataclass(slots=True, frozen=True)
class OwnedBuffer:
    handle: int
    data: bytes = b""
    length: int = 0

    def text(self) -> str:
        return self.data[: self.length].decode("utf-8")


class BufferPool:
    """Registry of buffers handed out to external callers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handles = itertools.count(1)
        self._buffers: dict[int, OwnedBuffer] = {}

    @property
    def outstanding(self) -> int:
        with self._lock:
            return len(self._buffers)

    def allocate(self, data: bytes) -> OwnedBuffer:
        try:
            payload = bytes(data)
        except MemoryError as exc:
            raise EvdsBoundaryError(
                ReturnError.BUFFER_ALLOCATION,
                field="response",
                value="out of memory",
            ) from exc
        with self._lock:
            buffer = OwnedBuffer(handle=next(self._handles), data=payload, length=len(payload))
            self._buffers[buffer.handle] = buffer
        return buffer

    def allocate_text(self, text: str) -> OwnedBuffer:
        return self.allocate(text.encode("utf-8"))

    def release(self, buffer: OwnedBuffer | int) -> None:
        handle = buffer.handle if isinstance(buffer, OwnedBuffer) else buffer
        with self._lock:
            released = self._buffers.pop(handle, None)
        if released is None:
            raise EvdsBoundaryError(ReturnError.UNKNOWN_BUFFER, field="release", value=handle)

    def is_live(self, buffer: OwnedBuffer | int) -> bool:
        handle = buffer.handle if isinstance(buffer, OwnedBuffer) else buffer
        with self._lock:
            return handle in self._buffers


__all__ = [
    "ExternalBuffer",
    "OwnedBuffer",
    "BufferPool",
    "read_text",
]
