from __future__ import annotations

import logging
from typing import Any, List

import pytest
import requests

from lab_catalog.catalog import LabCatalog
from lab_catalog.errors import CatalogLoadError
from lab_catalog.models import LabImage
from lab_catalog.remote import RemoteCatalogClient, parse_catalog
from lab_catalog.search import filter_images

RECORDS = [
    {
        "_id": "64f0a1",
        "subject": "OS Labs",
        "semester": "Sem 5",
        "ubuntuPullCommand": "docker pull os:u",
        "windowsPullCommand": "docker pull os:w",
        "ubuntuRunCommand": "docker run os:u",
        "notes": "Bring a laptop.",
        "__v": 0,
    },
    {"_id": "64f0a2", "subject": "Database Systems", "semester": "Sem 6"},
]


class _Response:
    def __init__(self, payload: Any = None, *, status: int = 200, bad_json: bool = False) -> None:
        self.payload = payload
        self.status = status
        self.bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Server Error")

    def json(self) -> Any:
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


class _Session:
    def __init__(self, response: Any) -> None:
        self.response = response
        self.calls: List[tuple] = []

    def get(self, url: str, timeout: float) -> _Response:
        self.calls.append((url, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def test_parse_catalog_maps_wire_fields() -> None:
    images = parse_catalog(RECORDS)
    assert [img.id for img in images] == ["64f0a1", "64f0a2"]
    first = images[0]
    assert first.subject == "OS Labs"
    assert first.ubuntu_pull_command == "docker pull os:u"
    assert first.windows_run_command is None
    assert first.title == "Sem 5 - OS Labs"


def test_parse_catalog_accepts_plain_id() -> None:
    assert parse_catalog([{"id": 7, "subject": "Networks"}])[0].id == "7"


@pytest.mark.parametrize(
    "payload",
    [
        {"images": []},
        ["not-a-record"],
        [{"subject": "No id"}],
        [{"_id": "a"}, {"_id": "a"}],
    ],
)
def test_parse_catalog_rejects_malformed_payloads(payload: Any) -> None:
    with pytest.raises(CatalogLoadError):
        parse_catalog(payload)


def test_remote_client_fetches_with_timeout() -> None:
    session = _Session(_Response(RECORDS))
    client = RemoteCatalogClient("http://catalog/api/images", timeout=3.0, session=session)
    images = client.fetch_images()
    assert len(images) == 2
    assert session.calls == [("http://catalog/api/images", 3.0)]


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("refused"),
        _Response(status=500),
        _Response(bad_json=True),
    ],
)
def test_remote_client_wraps_failures(response: Any) -> None:
    client = RemoteCatalogClient("http://catalog/api/images", session=_Session(response))
    with pytest.raises(CatalogLoadError):
        client.fetch_images()


def test_catalog_starts_empty() -> None:
    catalog = LabCatalog()
    assert catalog.images == ()
    assert not catalog.loaded
    assert catalog.get("a") is None


def test_failed_first_load_leaves_catalog_empty(caplog: pytest.LogCaptureFixture) -> None:
    def fetch() -> List[LabImage]:
        raise CatalogLoadError("connection refused")

    catalog = LabCatalog(fetch)
    with caplog.at_level(logging.ERROR, logger="dockerlab.catalog"):
        with pytest.raises(CatalogLoadError):
            catalog.load()
    assert catalog.images == ()
    assert isinstance(catalog.last_error, CatalogLoadError)
    assert "connection refused" in caplog.text


def test_failed_reload_keeps_previous_catalog() -> None:
    results: List[Any] = [parse_catalog(RECORDS), CatalogLoadError("timeout")]

    def fetch() -> List[LabImage]:
        result = results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    catalog = LabCatalog(fetch)
    first = catalog.load()
    with pytest.raises(CatalogLoadError):
        catalog.load()
    assert list(catalog.images) == first
    assert [img.id for img in filter_images(catalog.images, "os")] == ["64f0a1"]


def test_successful_reload_replaces_catalog_wholesale() -> None:
    catalog = LabCatalog()
    catalog.replace(parse_catalog(RECORDS))
    catalog.replace([LabImage("z", subject="Compilers")])
    assert [img.id for img in catalog.images] == ["z"]
    assert catalog.get("64f0a1") is None
    assert catalog.get("z").subject == "Compilers"


def test_load_without_fetcher_is_an_error() -> None:
    with pytest.raises(CatalogLoadError):
        LabCatalog().load()


def test_parse_catalog_falls_back_to_plain_id_when_underscore_id_is_null() -> None:
    assert parse_catalog([{"_id": None, "id": "x"}])[0].id == "x"
    assert parse_catalog([{"_id": "", "id": 3}])[0].id == "3"


def test_fetch_wraps_unexpected_errors_and_load_keeps_prior_images() -> None:
    calls: List[int] = []

    def fetch() -> List[LabImage]:
        calls.append(1)
        if len(calls) > 1:
            raise RuntimeError("socket closed")
        return parse_catalog(RECORDS)

    catalog = LabCatalog(fetch)
    assert catalog.can_fetch
    first = catalog.load()
    with pytest.raises(CatalogLoadError, match="socket closed"):
        catalog.fetch()
    with pytest.raises(CatalogLoadError):
        catalog.load()
    assert list(catalog.images) == first
    assert isinstance(catalog.last_error, CatalogLoadError)


def test_fetch_does_not_touch_catalog_state() -> None:
    catalog = LabCatalog(lambda: parse_catalog(RECORDS))
    images = catalog.fetch()
    assert len(images) == 2
    assert not catalog.loaded
    assert catalog.images == ()
