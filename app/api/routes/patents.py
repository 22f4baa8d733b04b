"""Patent search endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app import schemas
from app.api.dependencies import PatentResolver

router = APIRouter(prefix="/patents", tags=["patents"])


@router.get("/search", response_model=schemas.PatentSearchResult)
def search_patents(
    resolver: PatentResolver,
    assignee: Optional[str] = Query(None, description="Assignee (company) name to search for."),
) -> schemas.SearchResult:
    """Return patents and applications held by ``assignee``."""

    if not assignee or not assignee.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Assignee parameter required"
        )
    return resolver.resolve(assignee)
