"""Provider request shapes and response mapping, against a mocked transport."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from app.core.config import Settings
from app.services import PatentsViewProvider, PedsProvider, TsdrProvider
from app.services.providers import build_patent_providers, build_trademark_providers

PEDS_URL = "https://peds.test/api/queries"
PV_URL = "https://patentsview.test/patents/query"
TSDR_URL = "https://tsdr.test/statusview/search"


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _peds_payload(*docs: dict) -> dict:
    return {"queryResults": {"searchResponse": {"response": {"numFound": len(docs), "docs": list(docs)}}}}


def test_peds_posts_search_text_and_maps_fields() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json=_peds_payload(
                {
                    "patentNumber": "11223344",
                    "appEarlyPubNumber": "US20200012345A1",
                    "applicationNumberText": "16123456",
                    "inventionTitle": "Filter cartridge",
                    "appFilingDate": "2018-03-01",
                    "patentIssueDate": "2022-05-24",
                    "appStatus": "Patented Case",
                    "appType": "Utility",
                },
                {
                    "appEarlyPubNumber": "US20230099999A1",
                    "applicationNumberText": "17999999",
                    "inventionTitle": "Sensor patch",
                    "appFilingDate": "2021-09-09",
                },
                {"applicationNumberText": 18000001, "patentIssueDate": "2024-01-02"},
            ),
        )

    result = PedsProvider(PEDS_URL, client=_client(handler)).query("KidneyAide")

    assert seen["method"] == "POST"
    assert seen["body"]["searchText"] == "KidneyAide"
    assert result.ok
    first, second, third = result.records
    assert first.patent_number == "11223344"
    assert first.status == "Patented Case"
    assert first.type == "Utility"
    assert second.patent_number == "US20230099999A1"
    assert second.patent_date is None
    assert second.status == "Pending"
    assert third.patent_number == "18000001"
    assert third.status == "Granted"


def test_peds_without_docs_is_empty_not_failed() -> None:
    handler = lambda request: httpx.Response(200, json={"queryResults": {"searchResponse": {}}})
    result = PedsProvider(PEDS_URL, client=_client(handler)).query("Nobody")
    assert result.ok
    assert result.records == []


def test_peds_missing_query_results_is_provider_error() -> None:
    handler = lambda request: httpx.Response(200, json={"message": "maintenance"})
    result = PedsProvider(PEDS_URL, client=_client(handler)).query("Acme")
    assert not result.ok
    assert result.error.provider == "peds"
    assert result.records == []


def test_patentsview_sends_assignee_query_and_derives_status() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["q"] = json.loads(request.url.params["q"])
        seen["f"] = json.loads(request.url.params["f"])
        seen["o"] = json.loads(request.url.params["o"])
        return httpx.Response(
            200,
            json={
                "patents": [
                    {
                        "patent_number": "10987654",
                        "patent_title": "Renal monitor",
                        "patent_date": "2021-04-20",
                        "patent_type": "utility",
                        "applications": [{"app_date": "2019-01-15"}],
                        "assignee_organization": "Acme Corp",
                    },
                    {"patent_number": "D901234", "patent_title": "Housing", "app_date": "2020-02-02"},
                ],
                "count": 2,
            },
        )

    result = PatentsViewProvider(PV_URL, client=_client(handler)).query("Acme Corp")

    assert seen["q"] == {
        "_or": [
            {"assignee_organization": "Acme Corp"},
            {"_text_any": {"assignee_organization": "Acme Corp"}},
        ]
    }
    assert "patent_number" in seen["f"]
    assert "patent_type" in seen["f"]
    assert seen["o"] == {"per_page": 100}
    granted, pending = result.records
    assert granted.app_date == "2019-01-15"
    assert granted.status == "Granted"
    assert granted.type == "utility"
    assert pending.app_date == "2020-02-02"
    assert pending.status == "Pending"


def test_patentsview_null_patents_is_provider_error() -> None:
    handler = lambda request: httpx.Response(200, json={"patents": None, "count": 0})
    result = PatentsViewProvider(PV_URL, client=_client(handler)).query("Nobody")
    assert not result.ok


def test_tsdr_maps_fallback_fields() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["q"] == "Acme"
        assert request.url.params["wt"] == "json"
        return httpx.Response(
            200,
            json={
                "response": {
                    "docs": [
                        {
                            "applicationSerialNumber": "97000001",
                            "markLiteralElementText": "ACME",
                            "applicationFilingDate": "2021-06-01",
                            "markCurrentStatusExternalDescriptionText": "REGISTERED",
                            "ownerName": "Acme Corp",
                            "registrationDate": "2022-03-08",
                        },
                        {
                            "registrationNumber": 5123456,
                            "markDrawingCode": "2000",
                            "markCurrentStatusExternalDescriptionText": "Live/Pending",
                        },
                    ]
                }
            },
        )

    result = TsdrProvider(TSDR_URL, client=_client(handler)).query("Acme")

    word, design = result.records
    assert word.serialNumber == "97000001"
    assert word.mark == "ACME"
    assert word.registrationDate == "2022-03-08"
    assert word.is_registered
    assert design.serialNumber == "5123456"
    assert design.mark == "2000"
    assert not design.is_registered


def _raise_timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectTimeout("timed out", request=request)


def _raise_tls(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("certificate verify failed", request=request)


@pytest.mark.parametrize(
    "handler",
    [
        _raise_timeout,
        _raise_tls,
        lambda request: httpx.Response(503, text="Service Unavailable"),
        lambda request: httpx.Response(200, text="<html>maintenance</html>"),
        lambda request: httpx.Response(200, json=["unexpected", "list"]),
        lambda request: httpx.Response(200, json={"response": ["not", "a", "mapping"]}),
    ],
    ids=["timeout", "tls", "http-503", "html-body", "list-body", "bad-response-block"],
)
def test_tsdr_failures_become_empty_provider_errors(handler) -> None:
    result = TsdrProvider(TSDR_URL, client=_client(handler)).query("Acme")
    assert not result.ok
    assert result.records == []
    assert result.error.provider == "tsdr"


def test_factories_order_and_share_client() -> None:
    settings = Settings(peds_url=PEDS_URL, patentsview_url=PV_URL, tsdr_url=TSDR_URL)
    client = _client(lambda request: httpx.Response(200, json={}))

    patents = build_patent_providers(settings, client)
    trademarks = build_trademark_providers(settings, client)

    assert [provider.name for provider in patents] == ["peds", "patentsview"]
    assert [provider.name for provider in trademarks] == ["tsdr"]
    assert patents[0].endpoint == PEDS_URL
    assert all(provider._client is client for provider in [*patents, *trademarks])
