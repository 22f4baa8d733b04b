"""Admin endpoints for client overrides."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from app import schemas
from app.api.dependencies import Cache, Clients
from app.core.errors import ValidationError
from app.services import SearchCache, normalize_name

router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)

SEARCH_DOMAINS = ("patents", "trademarks")


def _invalidate(cache: SearchCache, key: str) -> None:
    for domain in SEARCH_DOMAINS:
        cache.invalidate(f"{domain}:{key}")


@router.get("/clients", response_model=schemas.ClientList)
def list_clients(clients: Clients) -> schemas.ClientList:
    """Return every client override keyed by normalized name."""

    return schemas.ClientList(clients=clients.all())


@router.post(
    "/clients",
    response_model=schemas.ClientWriteResponse,
    response_model_exclude_none=True,
)
def upsert_client(
    clients: Clients, cache: Cache, payload: Optional[schemas.ClientUpsert] = None
) -> schemas.ClientWriteResponse:
    """Create or replace the override for ``payload.name``."""

    payload = payload or schemas.ClientUpsert()
    try:
        key = clients.upsert(payload.name, payload.patents, payload.trademarks)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    _invalidate(cache, key)
    return schemas.ClientWriteResponse(
        success=True, message=f"Client {payload.name} saved", key=key
    )


@router.delete(
    "/clients/{name}",
    response_model=schemas.ClientWriteResponse,
    response_model_exclude_none=True,
)
def delete_client(name: str, clients: Clients, cache: Cache) -> schemas.ClientWriteResponse:
    """Remove the override stored for ``name``."""

    if not clients.delete(name):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")

    _invalidate(cache, normalize_name(name))
    return schemas.ClientWriteResponse(success=True, message=f"Client {name} deleted")
