"""Stockfighter API client — heartbeat, venues, order books.

Every endpoint answers with a JSON object holding a boolean success flag.
When the flag is false the object carries an ``error`` string instead of
a payload. The flag is ``ok`` everywhere except ``GET /venues``, which
sends ``id`` instead. That is an upstream inconsistency in the API, and
the client follows what the server actually sends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from stockfighter.config.schema import AppConfig, ClientConfig
from stockfighter.exchange.errors import ApiError, ResponseShapeError
from stockfighter.exchange.transport import HttpTransport
from stockfighter.logging import get_logger
from stockfighter.models import Orderbook, VenueInfo
from stockfighter.models.wire import OrderbookPayload, VenuesPayload

log = get_logger(__name__)

P = TypeVar("P", bound=BaseModel)


class StockfighterAPI(ABC):
    """The read-only operations the API exposes.

    Each method returns its value or raises a StockfighterError.
    """

    @abstractmethod
    def heartbeat(self) -> None:
        """Check that the API is up."""
        ...

    @abstractmethod
    def venues(self) -> list[VenueInfo]:
        """List all venues."""
        ...

    @abstractmethod
    def venue_heartbeat(self, venue: str) -> None:
        """Check that one venue is up."""
        ...

    @abstractmethod
    def stock_orderbook(self, venue: str, stock: str) -> Orderbook:
        """Fetch the current order book for *stock* on *venue*."""
        ...


def _unwrap(body: Any, path: str, flag: str = "ok") -> dict[str, Any]:
    """Check the success flag of a response object and return the object.

    Raises ApiError when the flag is false, ResponseShapeError when the body
    is not an object or the flag/error fields are missing or mistyped.
    """
    if not isinstance(body, dict):
        raise ResponseShapeError(
            path, [{"loc": (), "msg": f"expected a JSON object, got {type(body).__name__}"}]
        )

    ok = body.get(flag)
    if not isinstance(ok, bool):
        raise ResponseShapeError(path, [{"loc": (flag,), "msg": "expected a boolean"}])
    if ok:
        return body

    error = body.get("error")
    if not isinstance(error, str):
        raise ResponseShapeError(path, [{"loc": ("error",), "msg": "expected a string"}])
    log.info("stockfighter_api_error", path=path, error=error)
    raise ApiError(error, path=path)


def _decode(model: type[P], body: dict[str, Any], path: str) -> P:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise ResponseShapeError(
            path, [{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()]
        ) from e


class StockfighterClient(StockfighterAPI):
    """Synchronous client for the Stockfighter REST API.

    Venue and stock symbols are interpolated into the URL path unescaped.
    """

    def __init__(self, config: ClientConfig, http: httpx.Client | None = None):
        self.config = config
        self.transport = HttpTransport(config, http=http)

    @classmethod
    def from_config(cls, config: AppConfig) -> StockfighterClient:
        return cls(config.stockfighter)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> StockfighterClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str, flag: str = "ok") -> dict[str, Any]:
        return _unwrap(self.transport.send(path), path, flag=flag)

    def heartbeat(self) -> None:
        self._get("/heartbeat")

    def venues(self) -> list[VenueInfo]:
        path = "/venues"
        body = self._get(path, flag="id")
        return _decode(VenuesPayload, body, path).to_domain()

    def venue_heartbeat(self, venue: str) -> None:
        self._get(f"/venues/{venue}/heartbeat")

    def stock_orderbook(self, venue: str, stock: str) -> Orderbook:
        path = f"/venues/{venue}/stocks/{stock}"
        body = self._get(path)
        book = _decode(OrderbookPayload, body, path).to_domain()
        log.debug(
            "stockfighter_orderbook",
            venue=venue,
            stock=stock,
            bids=len(book.bids),
            asks=len(book.asks),
        )
        return book
