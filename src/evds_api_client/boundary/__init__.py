"""Buffer marshalling for callers outside Python."""

from .buffers import BufferPool, ExternalBuffer, OwnedBuffer, read_text
from .entrypoints import BoundaryResult, EvdsBoundary
from .text import to_ascii

__all__ = [
    "BufferPool",
    "ExternalBuffer",
    "OwnedBuffer",
    "read_text",
    "BoundaryResult",
    "EvdsBoundary",
    "to_ascii",
]
