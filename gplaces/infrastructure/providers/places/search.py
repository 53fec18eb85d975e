from __future__ import annotations

from typing import TYPE_CHECKING

from gplaces.core.entities import SearchResponse
from gplaces.core.errors import ValidationError
from gplaces.core.types import FeatureType, PriceLevel, RankBy, enum_value

from .client import MAXIMUM_RADIUS, PlacesCall, format_location, format_number, format_price

if TYPE_CHECKING:
    from .service import Service

ERR_INVALID_BY_PROMINENCE = "radius must be specified when RankByProminence is used"
ERR_INVALID_BY_DISTANCE = (
    "when RankByDistance is specified, one or more of keyword, name, or types is required"
)
ERR_EMPTY_QUERY = "the search parameter cannot be empty"
ERR_MISSING_RADIUS = (
    "no radius is specified. The radius is required when specifying a location"
)
ERR_RADIUS_TOO_GREAT = "radius is too large, a maximum of 50 000 meters is allowed"


def _add_filters(
    params: dict[str, str],
    *,
    min_price: PriceLevel | None,
    max_price: PriceLevel | None,
    open_now: bool,
    types: list[FeatureType | str],
    zagat_selected: bool,
) -> None:
    if min_price is not None:
        params["minprice"] = format_price(min_price)
    if max_price is not None:
        params["maxprice"] = format_price(max_price)
    if open_now:
        params["opennow"] = "1"
    if types:
        params["types"] = "|".join(enum_value(t) for t in types)
    if zagat_selected:
        params["zagatselected"] = ""


class _SearchCall(PlacesCall):
    response_type = SearchResponse

    def __init__(self, service: Service):
        super().__init__(service)
        # Restricts results to places within the given price levels.
        self.min_price: PriceLevel | None = None
        self.max_price: PriceLevel | None = None
        self.open_now: bool = False
        # Places matching at least one of these types.
        self.types: list[FeatureType | str] = []
        self.zagat_selected: bool = False
        # Continuation cursor from a previous response. When set, the
        # upstream API ignores every other optional parameter.
        self.page_token: str = ""

    def do(self) -> SearchResponse:
        return super().do()


class NearbyCall(_SearchCall):
    """Places within an area, refined by keyword, name or type."""

    path = "/nearbysearch/json"

    def __init__(self, service: Service, lat: float, lng: float):
        super().__init__(service)
        self._lat = lat
        self._lng = lng

        # Matched against everything Google indexed for a place, reviews included.
        self.keyword: str = ""
        self.language: str = ""
        # Matched against all names of a place, not only the listed one.
        self.name: str = ""
        # Meters, at most 50 000. Not sent with RankBy.DISTANCE.
        self.radius: float = 0
        self.rank_by: RankBy | None = None

    @property
    def location(self) -> tuple[float, float]:
        return self._lat, self._lng

    def validate(self) -> None:
        if self.page_token:
            return
        if not self.rank_by or self.rank_by == RankBy.PROMINENCE:
            if self.radius == 0:
                raise ValidationError(ERR_INVALID_BY_PROMINENCE)
        elif self.rank_by == RankBy.DISTANCE:
            if not self.types and not self.name and not self.keyword:
                raise ValidationError(ERR_INVALID_BY_DISTANCE)

    def params(self) -> dict[str, str]:
        params = {
            "key": self.service.key,
            "location": format_location(self._lat, self._lng),
        }
        if self.page_token:
            params["pagetoken"] = self.page_token
            return params

        if self.keyword:
            params["keyword"] = self.keyword
        if self.language:
            params["language"] = self.language
        if self.name:
            params["name"] = self.name
        if self.rank_by != RankBy.DISTANCE and self.radius > 0:
            params["radius"] = format_number(self.radius)
        if self.rank_by:
            params["rankby"] = enum_value(self.rank_by)
        _add_filters(
            params,
            min_price=self.min_price,
            max_price=self.max_price,
            open_now=self.open_now,
            types=self.types,
            zagat_selected=self.zagat_selected,
        )
        return params


class TextSearchCall(_SearchCall):
    """Places matching a text string such as "pizza in New York".

    ``lat``/``lng`` bias the search around a point; 0.0 for both means no
    location, and a location requires a radius.
    """

    path = "/textsearch/json"

    def __init__(self, service: Service, query: str):
        super().__init__(service)
        self._query = query

        self.lat: float = 0.0
        self.lng: float = 0.0
        self.language: str = ""
        self.radius: float = 0

    @property
    def text(self) -> str:
        return self._query

    def _has_location(self) -> bool:
        return self.lat != 0 or self.lng != 0

    def validate(self) -> None:
        if self.page_token:
            return
        if not self._query:
            raise ValidationError(ERR_EMPTY_QUERY)
        if self._has_location() and self.radius == 0:
            raise ValidationError(ERR_MISSING_RADIUS)
        if self.radius > MAXIMUM_RADIUS:
            raise ValidationError(ERR_RADIUS_TOO_GREAT)

    def params(self) -> dict[str, str]:
        params = {"key": self.service.key}
        if self.page_token:
            params["pagetoken"] = self.page_token
            return params

        if self._has_location():
            params["location"] = format_location(self.lat, self.lng)
        if self.language:
            params["language"] = self.language
        if self._query:
            params["query"] = self._query
        if self.radius > 0:
            params["radius"] = format_number(self.radius)
        _add_filters(
            params,
            min_price=self.min_price,
            max_price=self.max_price,
            open_now=self.open_now,
            types=self.types,
            zagat_selected=self.zagat_selected,
        )
        return params


class RadarSearchCall(_SearchCall):
    """Up to 200 places around a point, with less detail than the other searches.

    No local validation; the upstream API enforces its own rules.
    """

    path = "/radarsearch/json"

    def __init__(self, service: Service, radius: float, lat: float, lng: float):
        super().__init__(service)
        self._radius = radius
        self._lat = lat
        self._lng = lng

        self.keyword: str = ""

    @property
    def location(self) -> tuple[float, float]:
        return self._lat, self._lng

    @property
    def radius(self) -> float:
        return self._radius

    def params(self) -> dict[str, str]:
        params = {
            "key": self.service.key,
            "location": format_location(self._lat, self._lng),
            "radius": format_number(self._radius),
        }
        if self.page_token:
            params["pagetoken"] = self.page_token
            return params

        if self.keyword:
            params["keyword"] = self.keyword
        _add_filters(
            params,
            min_price=self.min_price,
            max_price=self.max_price,
            open_now=self.open_now,
            types=self.types,
            zagat_selected=self.zagat_selected,
        )
        return params
