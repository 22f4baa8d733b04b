"""FastAPI entrypoint for the USPTO lookup proxy."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any, Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import schemas
from app.api.dependencies import Cache, Clients
from app.api.routes import admin
from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.services import ClientStore, ProviderAdapter, SearchCache, SearchResolver
from app.services.providers import (
    build_patent_providers,
    build_trademark_providers,
    make_http_client,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    patent_providers: Optional[Sequence[ProviderAdapter]] = None,
    trademark_providers: Optional[Sequence[ProviderAdapter]] = None,
    cache: Optional[SearchCache] = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The cache, client store and resolvers live on ``app.state`` for the life
    of the process. Provider lists and the cache may be injected for tests;
    otherwise the USPTO providers share one HTTP client that is closed on
    shutdown.
    """

    settings = settings or get_settings()

    http_client = None
    if patent_providers is None or trademark_providers is None:
        http_client = make_http_client(settings)
    if patent_providers is None:
        patent_providers = build_patent_providers(settings, http_client)
    if trademark_providers is None:
        trademark_providers = build_trademark_providers(settings, http_client)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        if http_client is not None:
            http_client.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_hosts,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    clients = ClientStore()
    if settings.seed_clients:
        clients.load()

    if cache is None:
        cache = SearchCache(ttl_seconds=settings.cache_ttl_seconds)
    app.state.cache = cache
    app.state.clients = clients
    app.state.patent_resolver = SearchResolver(
        "patents", schemas.PatentSearchResult, patent_providers, cache, clients
    )
    app.state.trademark_resolver = SearchResolver(
        "trademarks", schemas.TrademarkSearchResult, trademark_providers, cache, clients
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(admin.router)

    @app.get("/", tags=["meta"])
    async def service_info() -> dict[str, Any]:
        """Service metadata and endpoint directory."""

        prefix = settings.api_prefix
        return {
            "service": settings.app_name,
            "version": settings.version,
            "endpoints": {
                "patents": f"{prefix}/patents/search?assignee=CompanyName",
                "trademarks": f"{prefix}/trademarks/search?owner=CompanyName",
                "clients": "/admin/clients",
                "health": "/health",
            },
        }

    @app.get("/health", tags=["health"])
    async def healthcheck(search_cache: Cache, client_store: Clients) -> dict[str, Any]:
        """Health check with cache and client-override counts."""

        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "cacheSize": len(search_cache),
            "clients": len(client_store),
        }

    logger.info(
        "Configured %s patent and %s trademark providers",
        len(patent_providers),
        len(trademark_providers),
    )
    return app


app = create_app()
