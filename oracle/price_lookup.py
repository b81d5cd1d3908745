"""Spot price lookup against the upstream price API.

The upstream answers ``GET {base}/{SYMBOL}-USD/spot`` with a body shaped like
``{"data": {"amount": "3000.50", ...}}``.  Only ``data.amount`` is used and it
is returned exactly as the provider formats it.
"""

import logging
from typing import Optional

import httpx

from oracle.errors import UpstreamFetchError


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.coinbase.com/v2/prices"


class PriceFetcher:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        # No timeout: a request runs until the upstream answers or the
        # connection fails.
        self.client = client or httpx.AsyncClient(timeout=None)

    def spot_url(self, symbol: str) -> str:
        return f"{self.base_url}/{symbol.upper()}-USD/spot"

    async def fetch_price(self, symbol: str) -> str:
        """Return the upstream spot price for *symbol* in USD.

        Raises :class:`UpstreamFetchError` on transport errors, non-2xx
        statuses and bodies without a string ``data.amount``.
        """
        sym = symbol.upper()
        try:
            response = await self.client.get(self.spot_url(sym))
            response.raise_for_status()
            amount = response.json()["data"]["amount"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.error("[Oracle] Error fetching %s price: %s", symbol, exc)
            raise UpstreamFetchError(sym) from exc
        if not isinstance(amount, str):
            logger.error("[Oracle] Error fetching %s price: unexpected amount %r", symbol, amount)
            raise UpstreamFetchError(sym)
        return amount

    async def aclose(self):
        await self.client.aclose()
