from __future__ import annotations

import logging
from typing import Iterable

from gplaces.core.entities import PlaceDetails
from gplaces.core.errors import ApiError
from gplaces.core.status import is_not_found
from gplaces.infrastructure.providers.places.service import Service


class EnrichDetailsUseCase:
    logger = logging.getLogger(__name__)

    def __init__(self, service: Service, *, language: str = "", extensions: str = ""):
        self.service = service
        self.language = language
        self.extensions = extensions

    def run_for_place(self, place_id: str) -> PlaceDetails:
        call = self.service.details(place_id)
        call.language = self.language
        call.extensions = self.extensions
        return call.do().result

    def run(self, hits: Iterable[PlaceDetails]) -> list[PlaceDetails]:
        seen: set[str] = set()
        out: list[PlaceDetails] = []
        for h in hits:
            if not h.place_id or h.place_id in seen:
                continue
            seen.add(h.place_id)
            try:
                d = self.run_for_place(h.place_id)
            except ApiError as exc:
                if not is_not_found(exc):
                    raise
                self.logger.warning(f"[DETAILS] {h.place_id} not found, skipping")
                continue
            out.append(d)
        return out
