"""Exception hierarchy for API calls.

Every failure of a call surfaces as a StockfighterError subclass; the
response is discarded as a whole. ApiError is the only one the server
reported itself. The others mean the call could not produce a usable
response at all.
"""

from __future__ import annotations

from typing import Any


class StockfighterError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestFailed(StockfighterError):
    """The HTTP request could not be completed (connect, timeout, protocol)."""


class InvalidResponseBody(StockfighterError):
    """The response body was not valid JSON."""


class ResponseShapeError(StockfighterError):
    """Valid JSON that does not match the endpoint's expected shape.

    ``errors`` lists every problem found in the response, each a dict with
    ``loc`` and ``msg`` keys.
    """

    def __init__(self, path: str, errors: list[dict[str, Any]]):
        self.path = path
        self.errors = errors
        detail = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in errors
        )
        super().__init__(f"unexpected response shape from {path}: {detail}")

    def __reduce__(self):
        return type(self), (self.path, self.errors)


class ApiError(StockfighterError):
    """The API answered with its success flag set to false.

    ``message`` is the server's ``error`` text, unchanged.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __reduce__(self):
        return type(self), (self.message, self.path)
