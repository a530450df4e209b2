"""Core errors, models and transports."""

__all__: list[str] = []
