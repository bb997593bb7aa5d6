"""Stockfighter exchange-simulation API client."""

from stockfighter.config import AppConfig, ClientConfig, load_config
from stockfighter.exchange import (
    ApiError,
    HttpTransport,
    InvalidResponseBody,
    RequestFailed,
    ResponseShapeError,
    StockfighterAPI,
    StockfighterClient,
    StockfighterError,
)
from stockfighter.models import Order, Orderbook, VenueInfo

__all__ = [
    "ApiError",
    "AppConfig",
    "ClientConfig",
    "HttpTransport",
    "InvalidResponseBody",
    "Order",
    "Orderbook",
    "RequestFailed",
    "ResponseShapeError",
    "StockfighterAPI",
    "StockfighterClient",
    "StockfighterError",
    "VenueInfo",
    "load_config",
]
