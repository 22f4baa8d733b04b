"""Service exports."""

from app.services.cache import SearchCache
from app.services.clients import ClientStore, normalize_name
from app.services.providers import (
	PatentsViewProvider,
	PedsProvider,
	ProviderAdapter,
	ProviderResult,
	TsdrProvider,
)
from app.services.resolver import SearchResolver

__all__ = [
	"ClientStore",
	"PatentsViewProvider",
	"PedsProvider",
	"ProviderAdapter",
	"ProviderResult",
	"SearchCache",
	"SearchResolver",
	"TsdrProvider",
	"normalize_name",
]
