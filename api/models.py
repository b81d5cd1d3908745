from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, Field

SERVICE_NAME = "Crypto Price Oracle"
SERVICE_VERSION = "1.0.0"
PROVIDER = "HighStation Demo Oracle"


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PriceRequest(BaseModel):
    symbol: Any = None  # only presence is checked


class PriceResult(BaseModel):
    symbol: str
    price: str  # upstream decimal string, never parsed
    currency: str = "USD"
    timestamp: str = Field(default_factory=utc_timestamp)  # ISO-8601
    provider: str = PROVIDER


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str = "active"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION


class ServiceInfo(BaseModel):
    service: str = SERVICE_NAME
    status: str = "online"
    endpoints: List[str] = Field(
        default_factory=lambda: [
            "GET /api/v1/price/:symbol",
            'POST /api/v1/price (body: {"symbol": "BTC"})',
            "GET /health",
        ]
    )
