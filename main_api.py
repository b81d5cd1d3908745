import logging

import uvicorn

from api.server import app
from oracle.price_lookup import PriceFetcher
from utils.settings import settings

logger = logging.getLogger(__name__)


def run():
    """Configure logging, attach the price fetcher and serve the API."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.fetcher = PriceFetcher(settings.upstream_base_url)
    logger.info("Crypto Price Oracle listening at http://localhost:%d", settings.port)
    logger.info("Available symbols: BTC, ETH, CRO, etc.")
    uvicorn.run(app, host=settings.bind, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
