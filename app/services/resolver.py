"""Search resolution: cache, client overrides, then upstream providers in order."""

from __future__ import annotations

import logging
from typing import Sequence, Type

from app.core.errors import ValidationError
from app.schemas.search import SearchResult, SearchSource
from app.services.cache import SearchCache
from app.services.clients import ClientStore, normalize_name
from app.services.providers import ProviderAdapter

logger = logging.getLogger(__name__)


NO_RESULTS_MESSAGE = (
    "No {domain} found for {term!r}. The name may be spelled differently in "
    "USPTO records, filed under a parent company or individual inventor, or "
    "the upstream services may be temporarily unavailable."
)


class SearchResolver:
    """Resolve one search domain ("patents" or "trademarks") for an entity name.

    The resolver holds no state of its own. Each call checks the cache, then
    the client overrides, then asks each provider in priority order until one
    returns records. Every outcome, including empty and failed lookups, is
    cached under ``"<domain>:<normalized name>"``.
    """

    def __init__(
        self,
        domain: str,
        result_model: Type[SearchResult],
        providers: Sequence[ProviderAdapter],
        cache: SearchCache,
        clients: ClientStore,
    ) -> None:
        self.domain = domain
        self.result_model = result_model
        self.providers = list(providers)
        self.cache = cache
        self.clients = clients

    def cache_key(self, term: str) -> str:
        # names without ASCII letters or digits keep their own text as the key
        return f"{self.domain}:{normalize_name(term) or term.strip().lower()}"

    def resolve(self, term: str) -> SearchResult:
        if not term or not term.strip():
            raise ValidationError(f"A search term is required to look up {self.domain}")

        key = self.cache_key(term)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        result = self._resolve_uncached(term)
        self.cache.set(key, result)
        return result

    def _resolve_uncached(self, term: str) -> SearchResult:
        client = self.clients.lookup(term)
        if client is not None:
            logger.debug("Serving %s for %r from client overrides", self.domain, term)
            return self.result_model.from_records(
                getattr(client, self.domain), SearchSource.CLIENT_DATABASE
            )

        try:
            for provider in self.providers:
                outcome = provider.query(term)
                if outcome.records:
                    return self.result_model.from_records(outcome.records, SearchSource.USPTO_API)
        except Exception as exc:
            logger.exception("%s lookup for %r failed", self.domain, term)
            return self.result_model.from_records(
                [],
                SearchSource.ERROR,
                message=f"Failed to search {self.domain}",
                error=str(exc),
            )

        return self.result_model.from_records(
            [],
            SearchSource.NONE,
            message=NO_RESULTS_MESSAGE.format(domain=self.domain, term=term.strip()),
        )
