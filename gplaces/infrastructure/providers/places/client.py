from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from gplaces.core.entities import DetailsResponse, SearchResponse
from gplaces.core.errors import ApiError, BadResponseError, DecodeError
from gplaces.core.types import PriceLevel, Status

if TYPE_CHECKING:
    from .service import Service

MAXIMUM_RADIUS = 50_000  # meters, the cap for most Places services


def format_number(v: float) -> str:
    v = float(v)
    return str(int(v)) if v.is_integer() else repr(v)


def format_location(lat: float, lng: float) -> str:
    return f"{lat:f},{lng:f}"


def format_price(p: PriceLevel | int) -> str:
    return str(int(p))


class PlacesCall(ABC):
    """One request against a Places endpoint.

    Subclasses set ``path`` and ``response_type`` and implement ``params()``;
    ``do()`` runs validation, the GET, and the shared response policy.
    """

    logger = logging.getLogger(__name__)

    path: str = ""
    response_type: Any = SearchResponse

    def __init__(self, service: Service):
        self.service = service

    def validate(self) -> None:
        return None

    @abstractmethod
    def params(self) -> dict[str, str]: ...

    def query(self, params: dict[str, str] | None = None) -> str:
        return urlencode(sorted((params if params is not None else self.params()).items()))

    def url(self) -> str:
        return f"{self.service.url}{self.path}?{self.query()}"

    def redacted_url(self) -> str:
        params = self.params()
        if "key" in params:
            params["key"] = "REDACTED"
        return f"{self.service.url}{self.path}?{self.query(params)}"

    def do(self) -> SearchResponse | DetailsResponse:
        self.validate()
        url = self.url()
        self.logger.debug("GET %s", self.redacted_url())

        # transport errors from the client propagate as they are
        r = self.service.client.get(url, timeout=self.service.timeout)
        if r.status_code != 200:
            self.logger.debug("%s -> HTTP %s", self.path, r.status_code)
            raise BadResponseError(r.status_code, r.text)

        try:
            data = self.response_type.from_json(r.json())
        except (ValueError, TypeError, AttributeError, OverflowError) as exc:
            raise DecodeError(f"cannot decode {self.path} response: {exc}") from exc

        if data.status != Status.OK.value:
            level = logging.INFO if data.status == Status.ZERO_RESULTS.value else logging.WARNING
            self.logger.log(
                level,
                "%s failed: status=%s, error_message=%s",
                self.path,
                data.status,
                data.error_message,
            )
            raise ApiError(data.status, data.error_message)

        self.logger.debug("%s -> %s", self.path, data.status)
        return data
