"""Wire schemas — the JSON shapes the API returns, decoded strictly.

Each response body is validated in a single pass so that every missing or
mistyped field is reported together. Scalar fields are strict, so a quoted
number is not an int and a float is not a quantity.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, StrictStr, field_validator

from stockfighter.models.orderbook import Order, Orderbook
from stockfighter.models.types import StrictU64
from stockfighter.models.venue import VenueInfo

# datetime.fromisoformat keeps at most microseconds; the API sends nanoseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def parse_timestamp(raw: Any) -> datetime:
    """Parse an ISO-8601 timestamp that must carry a UTC offset.

    Accepts ``Z`` or ``±HH:MM`` offsets and any number of fractional second
    digits (truncated to microseconds). Naive timestamps are rejected.
    """
    if not isinstance(raw, str):
        raise ValueError("timestamp must be a string")
    try:
        ts = datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", raw))
    except ValueError:
        raise ValueError(f"not an ISO-8601 timestamp: {raw!r}") from None
    if ts.tzinfo is None:
        raise ValueError(f"timestamp has no UTC offset: {raw!r}")
    return ts


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class WireVenue(_Wire):
    id: StrictU64
    name: StrictStr
    venue: StrictStr
    state: Literal["open", "closed"]

    def to_domain(self) -> VenueInfo:
        return VenueInfo(
            id=self.id,
            name=self.name,
            is_open=self.state == "open",
            venue=self.venue,
        )


class VenuesPayload(_Wire):
    venues: list[WireVenue]

    def to_domain(self) -> list[VenueInfo]:
        return [v.to_domain() for v in self.venues]


class WireLevel(_Wire):
    price: StrictU64
    qty: StrictU64

    def to_order(self, is_buy: bool) -> Order:
        return Order(price=self.price, qty=self.qty, is_buy=is_buy)


class OrderbookPayload(_Wire):
    # Required, but the API sends null for an empty side.
    bids: list[WireLevel] | None
    asks: list[WireLevel] | None
    ts: AwareDatetime

    @field_validator("ts", mode="before")
    @classmethod
    def parse_ts(cls, v: Any) -> datetime:
        return parse_timestamp(v)

    def to_domain(self) -> Orderbook:
        return Orderbook(
            bids=[level.to_order(is_buy=True) for level in self.bids or []],
            asks=[level.to_order(is_buy=False) for level in self.asks or []],
            timestamp=self.ts,
        )
