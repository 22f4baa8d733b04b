"""Upstream USPTO data sources and their mapping into canonical records."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

import httpx
from pydantic import ValidationError as SchemaError

from app.core.config import Settings
from app.core.errors import ProviderError
from app.schemas.patent import PatentRecord
from app.schemas.trademark import TrademarkRecord

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Provider results and protocol
# ---------------------------------------------------------------------------


@dataclass
class ProviderResult:
    """Records from one provider call, or the error that prevented them."""

    provider: str
    records: List[Any] = field(default_factory=list)
    error: Optional[ProviderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProviderAdapter(Protocol):
    """Interface for upstream data sources consulted by the resolver."""

    name: str

    def query(self, term: str) -> ProviderResult:
        ...


def make_http_client(settings: Settings) -> httpx.Client:
    """Shared client for every adapter.

    Certificate verification follows ``provider_verify_tls``; the USPTO hosts
    have served incomplete chains, so it is off unless configured.
    """

    return httpx.Client(
        timeout=settings.provider_timeout,
        verify=settings.provider_verify_tls,
        headers={"Accept": "application/json"},
    )


def _text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _first(*values: Any) -> Optional[str]:
    for value in values:
        text = _text(value)
        if text is not None:
            return text
    return None


class HttpProvider:
    """Base class handling transport and parse failures for one upstream.

    Subclasses implement :meth:`send` and :meth:`parse`. Transport errors,
    non-2xx responses, undecodable bodies and malformed payloads come back as
    a failed :class:`ProviderResult`; any other exception propagates.
    """

    name = ""

    def __init__(self, endpoint: str, client: httpx.Client) -> None:
        self.endpoint = endpoint
        self._client = client

    def send(self, term: str) -> httpx.Response:
        raise NotImplementedError

    def parse(self, payload: Any) -> List[Any]:
        raise NotImplementedError

    def query(self, term: str) -> ProviderResult:
        try:
            response = self.send(term)
            response.raise_for_status()
            payload = response.json()
            records = self.parse(payload)
        except httpx.HTTPError as exc:
            return self._failed(f"request failed: {exc}")
        except json.JSONDecodeError as exc:
            return self._failed(f"response is not JSON: {exc}")
        except SchemaError as exc:
            return self._failed(f"record did not match canonical shape: {exc}")
        except (AttributeError, KeyError, TypeError) as exc:
            return self._failed(f"unexpected payload shape: {exc!r}")
        except ProviderError as exc:
            LOGGER.warning("%s", exc)
            return ProviderResult(self.name, error=exc)

        LOGGER.info("%s returned %s records for %r", self.name, len(records), term)
        return ProviderResult(self.name, records)

    def _failed(self, message: str) -> ProviderResult:
        error = ProviderError(self.name, message)
        LOGGER.warning("%s", error)
        return ProviderResult(self.name, error=error)


# ---------------------------------------------------------------------------
# Patent providers
# ---------------------------------------------------------------------------


class PedsProvider(HttpProvider):
    """USPTO Patent Examination Data System full-text search."""

    name = "peds"

    def send(self, term: str) -> httpx.Response:
        body = {
            "searchText": term,
            "qf": "firstNamedApplicant",
            "fl": "*",
            "mm": "100%",
            "df": "patentTitle",
            "facet": "true",
            "sort": "applId asc",
            "start": "0",
        }
        return self._client.post(self.endpoint, json=body)

    def parse(self, payload: Dict[str, Any]) -> List[PatentRecord]:
        results = payload.get("queryResults")
        if results is None:
            raise ProviderError(self.name, "response has no queryResults")
        docs = ((results.get("searchResponse") or {}).get("response") or {}).get("docs") or []
        return [parse_peds_item(item) for item in docs]


def parse_peds_item(item: Dict[str, Any]) -> PatentRecord:
    issued = _text(item.get("patentIssueDate"))
    return PatentRecord(
        patent_number=_first(
            item.get("patentNumber"),
            item.get("appEarlyPubNumber"),
            item.get("applicationNumberText"),
        ),
        patent_title=_text(item.get("inventionTitle")),
        app_date=_text(item.get("appFilingDate")),
        patent_date=issued,
        status=_text(item.get("appStatus")) or ("Granted" if issued else "Pending"),
        type=_text(item.get("appType")),
    )


PATENTSVIEW_FIELDS = [
    "patent_number",
    "patent_title",
    "patent_date",
    "patent_type",
    "app_date",
    "assignee_organization",
]


class PatentsViewProvider(HttpProvider):
    """PatentsView granted-patent search by assignee organization."""

    name = "patentsview"
    per_page = 100

    def send(self, term: str) -> httpx.Response:
        params = {
            "q": json.dumps(build_patentsview_query(term)),
            "f": json.dumps(PATENTSVIEW_FIELDS),
            "o": json.dumps({"per_page": self.per_page}),
        }
        return self._client.get(self.endpoint, params=params)

    def parse(self, payload: Dict[str, Any]) -> List[PatentRecord]:
        patents = payload.get("patents")
        if patents is None:
            raise ProviderError(self.name, "response has no patents list")
        return [parse_patentsview_item(item) for item in patents]


def build_patentsview_query(term: str) -> Dict[str, Any]:
    return {
        "_or": [
            {"assignee_organization": term},
            {"_text_any": {"assignee_organization": term}},
        ]
    }


def parse_patentsview_item(item: Dict[str, Any]) -> PatentRecord:
    app_date = item.get("app_date")
    if app_date is None and item.get("applications"):
        # the legacy API nests application fields one level down
        app_date = item["applications"][0].get("app_date")

    granted = _text(item.get("patent_date"))
    return PatentRecord(
        patent_number=_text(item.get("patent_number")),
        patent_title=_text(item.get("patent_title")),
        app_date=_text(app_date),
        patent_date=granted,
        status="Granted" if granted else "Pending",
        type=_text(item.get("patent_type")),
    )


# ---------------------------------------------------------------------------
# Trademark providers
# ---------------------------------------------------------------------------


class TsdrProvider(HttpProvider):
    """USPTO Trademark Status & Document Retrieval free-text search."""

    name = "tsdr"
    rows = 100

    def send(self, term: str) -> httpx.Response:
        params = {"q": term, "rows": self.rows, "wt": "json"}
        return self._client.get(self.endpoint, params=params)

    def parse(self, payload: Dict[str, Any]) -> List[TrademarkRecord]:
        response = payload.get("response")
        if response is None:
            raise ProviderError(self.name, "response has no response block")
        return [parse_tsdr_item(item) for item in response.get("docs") or []]


def parse_tsdr_item(item: Dict[str, Any]) -> TrademarkRecord:
    return TrademarkRecord(
        serialNumber=_first(item.get("applicationSerialNumber"), item.get("registrationNumber")),
        mark=_first(item.get("markLiteralElementText"), item.get("markDrawingCode")),
        filingDate=_text(item.get("applicationFilingDate")),
        status=_text(item.get("markCurrentStatusExternalDescriptionText")),
        owner=_text(item.get("ownerName")),
        registrationDate=_text(item.get("registrationDate")),
    )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def build_patent_providers(settings: Settings, client: httpx.Client) -> List[ProviderAdapter]:
    """Patent sources in fallback order."""

    return [
        PedsProvider(settings.peds_url, client=client),
        PatentsViewProvider(settings.patentsview_url, client=client),
    ]


def build_trademark_providers(settings: Settings, client: httpx.Client) -> List[ProviderAdapter]:
    """Trademark sources in fallback order."""

    return [TsdrProvider(settings.tsdr_url, client=client)]
