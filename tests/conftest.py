import json
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

import pytest

from gplaces.infrastructure.providers.places.service import Service

DATA_DIR = Path(__file__).parent / "data"


class DummyResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


class DummySession:
    def __init__(self):
        self.calls = []
        self.queue = []
        self.closed = False

    def add(self, text, status_code=200):
        self.queue.append(DummyResponse(status_code, text))

    def add_error(self, exc):
        self.queue.append(exc)

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True

    def query(self, i=-1):
        """Query of the i-th request as a flat dict."""
        url, _ = self.calls[i]
        qs = parse_qs(urlsplit(url).query, keep_blank_values=True)
        return {k: v[0] for k, v in qs.items()}

    def path(self, i=-1):
        url, _ = self.calls[i]
        return urlsplit(url).path


def read_fixture(name):
    return (DATA_DIR / f"{name}.json").read_text(encoding="utf-8")


@pytest.fixture
def fixture():
    return read_fixture


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def service(session):
    s = Service(session, "testkey")
    s.set_url("http://places.test/maps/api/place")
    return s
