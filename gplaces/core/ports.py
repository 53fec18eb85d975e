from __future__ import annotations

from typing import Any, Protocol

from .entities import SearchResponse


class HttpResponse(Protocol):
    status_code: int
    text: str

    def json(self) -> Any: ...


class HttpClient(Protocol):
    """Anything with a requests-style ``get``; ``requests.Session`` fits."""

    def get(self, url: str, *, timeout: float | None = None) -> HttpResponse: ...


class PageableCall(Protocol):
    page_token: str

    def do(self) -> SearchResponse: ...
