"""Schema exports."""

from app.schemas.client import ClientList, ClientRecord, ClientUpsert, ClientWriteResponse
from app.schemas.patent import PatentRecord
from app.schemas.search import (
	PatentSearchResult,
	SearchResult,
	SearchSource,
	TrademarkSearchResult,
)
from app.schemas.trademark import TrademarkRecord

__all__ = [
	"ClientList",
	"ClientRecord",
	"ClientUpsert",
	"ClientWriteResponse",
	"PatentRecord",
	"PatentSearchResult",
	"SearchResult",
	"SearchSource",
	"TrademarkRecord",
	"TrademarkSearchResult",
]
