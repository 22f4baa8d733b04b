"""Exception types shared by the lookup services."""

from __future__ import annotations


class ValidationError(ValueError):
    """A required request parameter is missing or empty."""


class ProviderError(RuntimeError):
    """An upstream provider could not be reached or returned an unusable payload."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message
