"""API key, return format and the credential carrier shared by all requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import API_KEY_LENGTH
from .core.errors import EvdsValidationError, ReturnError


def _is_ascii_alnum(text: str) -> bool:
    return text.isascii() and text.isalnum()


@dataclass(slots=True, frozen=True)
class ApiKey:
    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != API_KEY_LENGTH:
            length = len(self.value) if isinstance(self.value, str) else None
            raise EvdsValidationError(
                ReturnError.INVALID_API_KEY_LENGTH,
                field="api_key",
                value=f"expected {API_KEY_LENGTH}, got {length}",
            )
        if not _is_ascii_alnum(self.value):
            raise EvdsValidationError(ReturnError.INVALID_API_KEY_CHARACTERS, field="api_key")

    @classmethod
    def from_text(cls, text: str) -> "ApiKey":
        return cls(text)

    def masked(self) -> str:
        return self.value[:2] + "*" * (len(self.value) - 2)

    def __str__(self) -> str:
        return self.masked()


class ReturnFormat(Enum):
    XML = "xml"
    JSON = "json"
    CSV = "csv"

    @property
    def token(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Evds:
    """API key and return format pair handed to every request builder."""

    api_key: ApiKey
    return_format: ReturnFormat = ReturnFormat.JSON

    @classmethod
    def from_parts(cls, api_key: ApiKey, return_format: ReturnFormat) -> "Evds":
        return cls(api_key=api_key, return_format=return_format)


__all__ = [
    "ApiKey",
    "ReturnFormat",
    "Evds",
]
