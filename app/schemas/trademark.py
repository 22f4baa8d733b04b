"""Canonical trademark record returned by every trademark source."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class TrademarkRecord(BaseModel):
    serialNumber: Optional[str] = Field(
        None, description="Application serial number, else registration number."
    )
    mark: Optional[str] = Field(None, description="Literal mark text, else the drawing code.")
    filingDate: Optional[str] = None
    status: Optional[str] = Field(None, description="Human-readable status description.")
    owner: Optional[str] = None
    registrationDate: Optional[str] = None

    @property
    def is_registered(self) -> bool:
        return bool(self.status) and "registered" in self.status.lower()
