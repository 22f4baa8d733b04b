"""Shared API dependencies for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, Request

from app.services import ClientStore, SearchCache, SearchResolver


def get_cache(request: Request) -> SearchCache:
    return request.app.state.cache


def get_clients(request: Request) -> ClientStore:
    return request.app.state.clients


def get_patent_resolver(request: Request) -> SearchResolver:
    return request.app.state.patent_resolver


def get_trademark_resolver(request: Request) -> SearchResolver:
    return request.app.state.trademark_resolver


Cache = Annotated[SearchCache, Depends(get_cache)]
Clients = Annotated[ClientStore, Depends(get_clients)]
PatentResolver = Annotated[SearchResolver, Depends(get_patent_resolver)]
TrademarkResolver = Annotated[SearchResolver, Depends(get_trademark_resolver)]
