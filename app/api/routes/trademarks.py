"""Trademark search endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app import schemas
from app.api.dependencies import TrademarkResolver

router = APIRouter(prefix="/trademarks", tags=["trademarks"])


@router.get("/search", response_model=schemas.TrademarkSearchResult)
def search_trademarks(
    resolver: TrademarkResolver,
    owner: Optional[str] = Query(None, description="Owner (company) name to search for."),
) -> schemas.SearchResult:
    """Return trademarks registered or applied for by ``owner``."""

    if not owner or not owner.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Owner parameter required")
    return resolver.resolve(owner)
