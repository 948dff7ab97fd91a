"""Errors raised by GenerationClient.generate."""
from __future__ import annotations


class GenerationError(Exception):
    """Base class for generation failures.

    The message is meant to be shown as-is; the lower-level exception, if
    any, is kept on `cause`.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class TransportError(GenerationError):
    """The HTTP call could not be completed (connect, DNS, TLS, timeout)."""


class GenerationFailure(GenerationError):
    """The server answered but the result is unusable."""
