"""Venue models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from stockfighter.models.types import U64


class VenueInfo(BaseModel):
    """A simulated exchange as listed by the API."""

    model_config = ConfigDict(frozen=True)

    id: U64
    name: str
    is_open: bool
    venue: str  # symbol, e.g. "TESTEX"
