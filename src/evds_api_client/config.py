"""Client configuration and process-wide validation constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

API_KEY_LENGTH: Final = 10
MAX_SERIES_COUNT: Final = 50
SERIES_SEPARATOR: Final = "-"
DATE_FORMAT: Final = "DD-MM-YYYY"
DATE_RANGE_SEPARATOR: Final = ","
ASCII_PLACEHOLDER: Final = "*"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class EvdsClientConfig:
    """Runtime configuration for EVDS client."""

    base_url: str = "https://evds2.tcmb.gov.tr/service/evds"
    user_agent: str = "evds-api-client/0.1.0"
    # Newer EVDS deployments read the key from a request header.
    send_key_header: bool = False

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if not isinstance(self.send_key_header, bool):
            raise ValueError("send_key_header must be bool")
        self.transport.validate()


__all__ = [
    "API_KEY_LENGTH",
    "MAX_SERIES_COUNT",
    "SERIES_SEPARATOR",
    "DATE_FORMAT",
    "DATE_RANGE_SEPARATOR",
    "ASCII_PLACEHOLDER",
    "TransportConfig",
    "EvdsClientConfig",
]
