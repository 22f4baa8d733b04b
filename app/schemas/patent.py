"""Canonical patent record returned by every patent source."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PatentRecord(BaseModel):
    patent_number: Optional[str] = Field(
        None, description="Issued number, else early-publication number, else application number."
    )
    patent_title: Optional[str] = None
    app_date: Optional[str] = Field(None, description="Application filing date as reported upstream.")
    patent_date: Optional[str] = Field(None, description="Issue date; null while the application is pending.")
    status: Optional[str] = None
    type: Optional[str] = Field(None, description="Application type (Utility, Design, ...).")

    @property
    def is_granted(self) -> bool:
        return bool(self.patent_date)
