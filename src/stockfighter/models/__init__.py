"""Pydantic domain models."""

from stockfighter.models.orderbook import Order, Orderbook
from stockfighter.models.venue import VenueInfo

__all__ = ["Order", "Orderbook", "VenueInfo"]
