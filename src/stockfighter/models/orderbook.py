"""Order book models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from stockfighter.models.types import U64


class Order(BaseModel):
    """One resting order level. Price is in minor currency units (cents)."""

    model_config = ConfigDict(frozen=True)

    price: U64
    qty: U64
    is_buy: bool


class Orderbook(BaseModel):
    """Snapshot of one stock's book on one venue.

    Bids and asks keep the order the server sent them in; the server lists
    each side best price first.
    """

    model_config = ConfigDict(frozen=True)

    bids: list[Order]
    asks: list[Order]
    timestamp: datetime

    @model_validator(mode="after")
    def check_sides(self) -> Orderbook:
        if any(not o.is_buy for o in self.bids):
            raise ValueError("bids must all have is_buy=True")
        if any(o.is_buy for o in self.asks):
            raise ValueError("asks must all have is_buy=False")
        return self

    @property
    def best_bid(self) -> Order | None:
        return self.bids[0] if self.bids else None

    @property
    def best_ask(self) -> Order | None:
        return self.asks[0] if self.asks else None
