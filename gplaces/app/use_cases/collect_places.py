from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from gplaces.core.entities import PlaceDetails, SearchResponse
from gplaces.core.ports import PageableCall

# a fresh next_page_token is rejected until it settles upstream
DEFAULT_PAGE_DELAY_SEC = 2.0


@dataclass
class CollectedPlaces:
    results: list[PlaceDetails] = field(default_factory=list)
    html_attributions: list[str] = field(default_factory=list)
    pages: int = 0


def _do(call: PageableCall) -> SearchResponse:
    return call.do()


class CollectPlacesUseCase:
    """Runs a search call and follows ``next_page_token`` until it runs out.

    ``fetch`` performs one page request and defaults to ``call.do()``; a
    caller wanting retries wraps it. Errors are not caught here, so a first
    page with ZERO_RESULTS raises like any other API error.
    """

    logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        fetch: Callable[[PageableCall], SearchResponse] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        page_delay: float = DEFAULT_PAGE_DELAY_SEC,
        max_pages: int | None = None,
    ):
        self.fetch = fetch or _do
        self.sleep = sleep
        self.page_delay = page_delay
        self.max_pages = max_pages

    def run(self, call: PageableCall) -> CollectedPlaces:
        out = CollectedPlaces()
        while True:
            resp = self.fetch(call)
            out.pages += 1
            out.results.extend(resp.results)
            for a in resp.html_attributions:
                if a not in out.html_attributions:
                    out.html_attributions.append(a)
            self.logger.info(f"[PAGE {out.pages}] {len(resp.results)} results")

            token = resp.next_page_token
            if not token:
                break
            if self.max_pages is not None and out.pages >= self.max_pages:
                self.logger.info(f"stopping at max_pages={self.max_pages}")
                break

            self.sleep(self.page_delay)
            call.page_token = token
        return out
