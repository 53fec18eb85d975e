from __future__ import annotations

from typing import TYPE_CHECKING

from gplaces.core.entities import DetailsResponse

from .client import PlacesCall

if TYPE_CHECKING:
    from .service import Service


class DetailsCall(PlacesCall):
    """Full record for one place: address, phone number, rating, reviews."""

    path = "/details/json"
    response_type = DetailsResponse

    def __init__(self, service: Service, place_id: str):
        super().__init__(service)
        self._place_id = place_id

        self.extensions: str = ""
        self.language: str = ""

    @property
    def place_id(self) -> str:
        return self._place_id

    def params(self) -> dict[str, str]:
        params = {"key": self.service.key, "placeid": self._place_id}
        if self.extensions:
            params["extensions"] = self.extensions
        if self.language:
            params["language"] = self.language
        return params

    def do(self) -> DetailsResponse:
        return super().do()
