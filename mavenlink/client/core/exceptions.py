"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class MavenlinkError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(MavenlinkError):
    """Request never produced a usable JSON body.

    Raised on network failure or when the response body cannot be parsed
    as JSON. The underlying exception is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code


class APIError(MavenlinkError):
    """Parsed response body carried an ``errors`` field."""

    def __init__(self, errors: Any) -> None:
        super().__init__(_describe_errors(errors))
        self.errors = errors


class ShapeError(MavenlinkError, KeyError):
    """Raw response is missing a key the normalizer needs."""

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message
        return self.message


def _describe_errors(errors: Any) -> str:
    if isinstance(errors, list):
        parts = []
        for err in errors:
            if isinstance(err, dict) and "message" in err:
                parts.append(str(err["message"]))
            else:
                parts.append(str(err))
        return "; ".join(parts) or "Mavenlink API error"
    return str(errors)
