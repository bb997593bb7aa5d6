#!/usr/bin/env python3
"""Smoke-test the live Stockfighter API against the TESTEX test venue.

Reads config the same way the library does (config.yaml + STOCKFIGHTER_* env).
Usage: STOCKFIGHTER_API_KEY=... python scripts/check_api.py [config.yaml]
"""

import sys

from stockfighter import StockfighterClient, StockfighterError, load_config
from stockfighter.logging import setup_logging_from_config

VENUE = "TESTEX"
STOCK = "FOOBAR"


def main() -> int:
    cfg = load_config(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
    setup_logging_from_config(cfg.logging)
    failures = 0

    with StockfighterClient.from_config(cfg) as sf:
        checks = [
            ("heartbeat", sf.heartbeat),
            ("venues", sf.venues),
            (f"venue_heartbeat {VENUE}", lambda: sf.venue_heartbeat(VENUE)),
            (f"stock_orderbook {VENUE}/{STOCK}", lambda: sf.stock_orderbook(VENUE, STOCK)),
        ]
        for i, (name, call) in enumerate(checks, start=1):
            print(f"{i}. {name}")
            try:
                result = call()
            except StockfighterError as e:
                failures += 1
                print(f"   {type(e).__name__}: {e}\n")
                continue
            print(f"   OK: {result!r}\n")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
