"""Reference client for the Crypto Price Oracle HTTP API.

This module demonstrates every operation the service exposes:

``GET /health``
    Liveness probe.  Never touches the upstream provider.

``GET /``
    Service descriptor listing the available endpoints.

``GET /api/v1/price/{symbol}``
    Spot price for a symbol given in the path.  Symbols are
    case-insensitive; the response always carries the upper-cased form.

``POST /api/v1/price``
    Same lookup with the symbol in a JSON body ``{"symbol": "BTC"}``.
    Omitting ``symbol`` yields a ``400`` with
    ``{"error": "Missing required field: symbol"}``.

Failed lookups answer ``404`` with ``{"error": "Failed to fetch price for
<SYMBOL>"}``.  The helpers below return the decoded JSON body either way so
callers can inspect the ``error`` field.

When executed as a script this module prints the health status and then the
price of every symbol given on the command line (``BTC`` and ``ETH`` when none
are given).
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import nullcontext
from typing import Any, Dict, Optional

import httpx

BASE_URL = os.getenv("ORACLE_URL", "http://127.0.0.1:4000")


logger = logging.getLogger(__name__)


def _client(client: Optional[httpx.Client]):
    # A caller-supplied client stays open for reuse.
    if client is not None:
        return nullcontext(client)
    return httpx.Client(base_url=BASE_URL)


def _decode(resp: httpx.Response) -> Dict[str, Any]:
    logger.info("received %d from %s: %s", resp.status_code, resp.request.url, resp.text)
    return resp.json()


def get_health(client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    with _client(client) as c:
        return _decode(c.get("/health"))


def get_price(symbol: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    with _client(client) as c:
        return _decode(c.get(f"/api/v1/price/{symbol}"))


def post_price(symbol: str, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    with _client(client) as c:
        return _decode(c.post("/api/v1/price", json={"symbol": symbol}))


def main(argv=None, client_factory=None):
    symbols = list(argv) if argv else ["BTC", "ETH"]
    factory = client_factory or (lambda: httpx.Client(base_url=BASE_URL))
    print("Health:", get_health(factory()))
    for symbol in symbols:
        result = get_price(symbol, factory())
        if "error" in result:
            print(f"{symbol}: {result['error']}")
        else:
            print(f"{result['symbol']}: {result['price']} {result['currency']} at {result['timestamp']}")


if __name__ == "__main__":  # pragma: no cover - example usage
    logging.basicConfig(level=logging.INFO)
    main(sys.argv[1:])
