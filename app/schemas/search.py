"""Aggregate search payloads shared by the patent and trademark endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.patent import PatentRecord
from app.schemas.trademark import TrademarkRecord


class SearchSource(str, Enum):
    """Where a search result came from."""

    CLIENT_DATABASE = "client_database"
    USPTO_API = "uspto_api"
    NONE = "none"
    ERROR = "error"


class SearchResult(BaseModel):
    """Counts plus the ordered record list.

    Subclasses name the granted/registered count on the wire (``count_field``)
    and decide which records count towards it. Always build instances through
    :meth:`from_records` so ``total == granted + applications == len(list)``.
    """

    count_field: ClassVar[str] = ""

    total: int = 0
    applications: int = 0
    source: SearchSource
    message: Optional[str] = None
    error: Optional[str] = None
    items: List[Any] = Field(default_factory=list, alias="list")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def counts_towards_granted(cls, record) -> bool:
        raise NotImplementedError

    @classmethod
    def from_records(
        cls,
        records: Iterable,
        source: SearchSource,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> "SearchResult":
        items = list(records)
        granted = sum(1 for record in items if cls.counts_towards_granted(record))
        return cls(
            **{cls.count_field: granted},
            total=len(items),
            applications=len(items) - granted,
            list=items,
            source=source,
            message=message,
            error=error,
        )

    @property
    def granted_or_registered(self) -> int:
        return getattr(self, self.count_field)


class PatentSearchResult(SearchResult):
    count_field: ClassVar[str] = "granted"

    granted: int = 0
    items: List[PatentRecord] = Field(default_factory=list, alias="list")

    @classmethod
    def counts_towards_granted(cls, record: PatentRecord) -> bool:
        return record.is_granted


class TrademarkSearchResult(SearchResult):
    count_field: ClassVar[str] = "registered"

    registered: int = 0
    items: List[TrademarkRecord] = Field(default_factory=list, alias="list")

    @classmethod
    def counts_towards_granted(cls, record: TrademarkRecord) -> bool:
        return record.is_registered
