from fastapi import Request

from oracle.price_lookup import PriceFetcher
from utils.settings import settings


def get_fetcher(request: Request) -> PriceFetcher:
    """Return the process-wide fetcher, creating it on first use."""
    state = request.app.state
    fetcher = getattr(state, "fetcher", None)
    if fetcher is None:
        fetcher = PriceFetcher(settings.upstream_base_url)
        state.fetcher = fetcher
    return fetcher
