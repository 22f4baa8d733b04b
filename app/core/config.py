"""Application configuration via environment variables."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = Field("USPTO Lookup Proxy", description="Human-readable service name.")
    version: str = Field("1.0.0", description="Service version reported by the root endpoint.")
    debug: bool = Field(False, description="Enable FastAPI debug mode.")

    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(10000, description="Listening port (PORT environment variable).")
    log_level: str = Field("INFO", description="Root logging level.")

    api_prefix: str = Field("/api", description="Root prefix for search API routes.")
    allowed_hosts: List[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by the CORS policy."
    )

    cache_ttl_seconds: float = Field(
        3600.0, description="Lifetime of a cached search result, in seconds."
    )
    provider_timeout: float = Field(
        15.0, description="Per-request timeout applied to every upstream call, in seconds."
    )
    provider_verify_tls: bool = Field(
        False,
        description="Verify upstream certificates. The USPTO hosts serve irregular chains.",
    )

    peds_url: str = Field(
        "https://ped.uspto.gov/api/queries",
        description="Patent Examination Data System query endpoint.",
    )
    patentsview_url: str = Field(
        "https://api.patentsview.org/patents/query",
        description="PatentsView granted-patent query endpoint.",
    )
    tsdr_url: str = Field(
        "https://tsdr.uspto.gov/statusview/search",
        description="Trademark Status & Document Retrieval search endpoint.",
    )

    seed_clients: bool = Field(
        True, description="Load the bundled client overrides at start-up."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    """Provide a cached Settings instance."""

    return Settings()
