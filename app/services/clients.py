"""Operator-curated client overrides, held for the life of the process."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional

from app.core.errors import ValidationError
from app.schemas.client import ClientRecord
from app.schemas.patent import PatentRecord
from app.schemas.trademark import TrademarkRecord

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "seed_clients.json"

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_name(name: str) -> str:
    """Lowercase ``name`` and drop everything outside ``[a-z0-9]``.

    Used for both storage and lookup keys, so "Kidney-Aide, Inc." and
    "KIDNEYAIDE INC" address the same record.
    """

    return _NON_ALNUM.sub("", name.lower())


class ClientStore:
    """Process-local table of client overrides keyed by normalized name."""

    def __init__(self) -> None:
        self._records: Dict[str, ClientRecord] = {}

    def lookup(self, name: str) -> Optional[ClientRecord]:
        return self._records.get(normalize_name(name))

    def upsert(
        self,
        name: Optional[str],
        patents: Optional[Iterable[PatentRecord]] = None,
        trademarks: Optional[Iterable[TrademarkRecord]] = None,
    ) -> str:
        """Insert or replace the record for ``name`` and return its key."""

        if not name or not name.strip():
            raise ValidationError("Client name is required")
        key = normalize_name(name)
        if not key:
            raise ValidationError(f"Client name {name!r} has no letters or digits")

        self._records[key] = ClientRecord(
            name=name,
            patents=list(patents or []),
            trademarks=list(trademarks or []),
        )
        logger.info("Stored client override %s (%s)", key, name)
        return key

    def delete(self, name: str) -> bool:
        key = normalize_name(name)
        existed = self._records.pop(key, None) is not None
        if existed:
            logger.info("Removed client override %s", key)
        return existed

    def all(self) -> Dict[str, ClientRecord]:
        return dict(self._records)

    def load(self, path: Path = SEED_PATH) -> int:
        """Upsert every client listed in a JSON seed file."""

        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)

        for item in payload:
            self.upsert(
                item.get("name"),
                patents=[PatentRecord(**entry) for entry in item.get("patents", [])],
                trademarks=[TrademarkRecord(**entry) for entry in item.get("trademarks", [])],
            )
        logger.info("Loaded %s client overrides from %s", len(payload), path)
        return len(payload)

    def __len__(self) -> int:
        return len(self._records)
