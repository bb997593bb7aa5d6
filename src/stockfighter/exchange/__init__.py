"""Stockfighter API client."""

from stockfighter.exchange.client import StockfighterAPI, StockfighterClient
from stockfighter.exchange.errors import (
    ApiError,
    InvalidResponseBody,
    RequestFailed,
    ResponseShapeError,
    StockfighterError,
)
from stockfighter.exchange.transport import AUTH_HEADER, HttpTransport

__all__ = [
    "AUTH_HEADER",
    "ApiError",
    "HttpTransport",
    "InvalidResponseBody",
    "RequestFailed",
    "ResponseShapeError",
    "StockfighterAPI",
    "StockfighterClient",
    "StockfighterError",
]
