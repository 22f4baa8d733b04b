"""Schemas for the client override admin endpoints."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.schemas.patent import PatentRecord
from app.schemas.trademark import TrademarkRecord


class ClientRecord(BaseModel):
    name: str = Field(..., description="Display name as entered by the operator.")
    patents: List[PatentRecord] = Field(default_factory=list)
    trademarks: List[TrademarkRecord] = Field(default_factory=list)


class ClientUpsert(BaseModel):
    # name stays optional here so a missing name surfaces as a 400, not a 422
    name: Optional[str] = None
    patents: Optional[List[PatentRecord]] = None
    trademarks: Optional[List[TrademarkRecord]] = None


class ClientList(BaseModel):
    clients: Dict[str, ClientRecord]


class ClientWriteResponse(BaseModel):
    success: bool
    message: str
    key: Optional[str] = None
