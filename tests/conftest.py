import json
from typing import Any, List, Optional

import pytest
import requests


class FakeResponse:
    def __init__(self, body: bytes = b"", status_code: int = 200, read_error: Optional[Exception] = None):
        self._body = body
        self.status_code = status_code
        self._read_error = read_error
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    @property
    def content(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakeSession:
    """Stands in for requests.Session; answers requests from a queue."""

    def __init__(self, *responses: Any):
        self._responses: List[Any] = list(responses)
        self.calls: List[dict] = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        nxt = self._responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


def make_page(blob: dict) -> str:
    escaped = json.dumps(blob).replace('"', "&quot;")
    return (
        "<html><body>\n"
        f'<div id="pagedata" data-blob="{escaped}"></div>\n'
        "</body></html>"
    )


@pytest.fixture
def page_blob() -> dict:
    return {
        "track_list": [
            {"band_name": "Some Band", "title": "First", "album_id": 111},
        ],
        "item_cache": {
            "collection": {},
            "wishlist": {
                "a111": {
                    "added": "01 Jan 2020 10:00:00 GMT",
                    "item_url": "https://someband.bandcamp.com/album/first",
                    "item_type": "album",
                },
                "t222": {
                    "added": "02 Jan 2020 10:00:00 GMT",
                    "item_url": "https://other.bandcamp.com/track/second",
                    "item_type": "track",
                },
            },
        },
        "collection_data": {"last_token": "", "sequence": [], "pending_sequence": ["c1"]},
        "wishlist_data": {
            "last_token": "1577872800:222:t::",
            "sequence": ["a111", "t222"],
            "pending_sequence": [],
        },
        "fan_data": {"fan_id": 4242},
    }


@pytest.fixture
def api_body() -> bytes:
    return json.dumps(
        {
            "track_list": [
                {"added": "x", "item_url": "https://third.bandcamp.com/album/third", "item_type": "album"},
                {"added": "y", "item_url": "https://fourth.bandcamp.com/track/fourth", "item_type": "track"},
            ],
            "more_available": False,
            "last_token": "1500000000:333:a::",
        }
    ).encode("utf-8")


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
