import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.deps import get_fetcher
from api.models import (
    SERVICE_NAME,
    SERVICE_VERSION,
    ErrorResponse,
    HealthStatus,
    PriceRequest,
    PriceResult,
    ServiceInfo,
)
from oracle.errors import OracleError, ValidationError
from oracle.price_lookup import PriceFetcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    fetcher = getattr(app.state, "fetcher", None)
    if fetcher is not None:
        await fetcher.aclose()


app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@app.exception_handler(OracleError)
async def oracle_error_handler(request: Request, exc: OracleError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("[Oracle] Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _lookup(symbol: str, fetcher: PriceFetcher) -> PriceResult:
    price = await fetcher.fetch_price(symbol)
    return PriceResult(symbol=symbol.upper(), price=price)


@app.get("/api/v1/price/{symbol}", response_model=PriceResult, responses=ERROR_RESPONSES)
async def get_price(symbol: str, fetcher: PriceFetcher = Depends(get_fetcher)):
    logger.info("[Oracle] Price request: %s", symbol)
    return await _lookup(symbol, fetcher)


@app.post("/api/v1/price", response_model=PriceResult, responses=ERROR_RESPONSES)
async def post_price(
    body: Optional[PriceRequest] = None,
    fetcher: PriceFetcher = Depends(get_fetcher),
):
    symbol = body.symbol if body is not None else None
    if not symbol:
        raise ValidationError("Missing required field: symbol")
    logger.info("[Oracle] Price request (POST): %s", symbol)
    return await _lookup(str(symbol), fetcher)


@app.get("/health", response_model=HealthStatus)
def health():
    return HealthStatus()


@app.get("/", response_model=ServiceInfo)
def root():
    return ServiceInfo()
