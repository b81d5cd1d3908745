"""Process configuration read from the environment (and a local ``.env``)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from oracle.price_lookup import DEFAULT_BASE_URL

load_dotenv()


class Settings(BaseModel):
    port: int = Field(default_factory=lambda: int(os.getenv("PORT") or 4000))
    bind: str = Field(default_factory=lambda: os.getenv("BIND") or "0.0.0.0")
    upstream_base_url: str = Field(
        default_factory=lambda: os.getenv("PRICE_API_BASE_URL") or DEFAULT_BASE_URL
    )
    log_level: str = Field(default_factory=lambda: (os.getenv("LOG_LEVEL") or "INFO").upper())


settings = Settings()
