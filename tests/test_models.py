"""Tests for Pydantic domain and wire models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from stockfighter.models import Order, Orderbook, VenueInfo
from stockfighter.models.wire import OrderbookPayload, VenuesPayload, parse_timestamp

NOW = datetime.now(timezone.utc)


class TestVenueInfo:
    def test_valid_venue(self):
        v = VenueInfo(id=1, name="Test Exchange", is_open=True, venue="TESTEX")
        assert v.venue == "TESTEX"

    def test_frozen(self):
        v = VenueInfo(id=1, name="Test Exchange", is_open=True, venue="TESTEX")
        with pytest.raises(ValidationError):
            v.is_open = False

    def test_id_must_be_unsigned(self):
        with pytest.raises(ValidationError):
            VenueInfo(id=-1, name="x", is_open=True, venue="X")


class TestOrderbook:
    def test_best_levels(self):
        book = Orderbook(
            bids=[Order(price=100, qty=5, is_buy=True), Order(price=99, qty=1, is_buy=True)],
            asks=[Order(price=110, qty=3, is_buy=False)],
            timestamp=NOW,
        )
        assert book.best_bid == Order(price=100, qty=5, is_buy=True)
        assert book.best_ask.price == 110

    def test_empty_book(self):
        book = Orderbook(bids=[], asks=[], timestamp=NOW)
        assert book.best_bid is None
        assert book.best_ask is None

    def test_bid_side_must_be_buys(self):
        with pytest.raises(ValidationError, match="bids"):
            Orderbook(bids=[Order(price=1, qty=1, is_buy=False)], asks=[], timestamp=NOW)

    def test_ask_side_must_be_sells(self):
        with pytest.raises(ValidationError, match="asks"):
            Orderbook(bids=[], asks=[Order(price=1, qty=1, is_buy=True)], timestamp=NOW)

    def test_order_is_hashable_value(self):
        a = Order(price=100, qty=5, is_buy=True)
        b = Order(price=100, qty=5, is_buy=True)
        assert a == b
        assert len({a, b}) == 1


class TestParseTimestamp:
    def test_nanoseconds_truncated(self):
        ts = parse_timestamp("2015-12-04T09:02:16.680986205Z")
        assert ts == datetime(2015, 12, 4, 9, 2, 16, 680986, tzinfo=timezone.utc)

    def test_no_fraction(self):
        ts = parse_timestamp("2015-12-04T09:02:16+00:00")
        assert ts == datetime(2015, 12, 4, 9, 2, 16, tzinfo=timezone.utc)

    def test_naive_rejected(self):
        with pytest.raises(ValueError, match="offset"):
            parse_timestamp("2015-12-04T09:02:16.680986")

    def test_date_only_rejected(self):
        with pytest.raises(ValueError):
            parse_timestamp("2015-12-04")

    def test_not_a_string(self):
        with pytest.raises(ValueError, match="string"):
            parse_timestamp(None)


class TestWirePayloads:
    def test_venues_extra_fields_ignored(self):
        payload = VenuesPayload.model_validate({
            "id": True,
            "venues": [{"id": 3, "name": "X", "venue": "XEX", "state": "closed", "extra": 1}],
        })
        assert payload.to_domain() == [VenueInfo(id=3, name="X", is_open=False, venue="XEX")]

    def test_orderbook_both_sides_null(self):
        payload = OrderbookPayload.model_validate({
            "bids": None,
            "asks": None,
            "ts": "2015-12-04T09:02:16Z",
        })
        book = payload.to_domain()
        assert book.bids == []
        assert book.asks == []
