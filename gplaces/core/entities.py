from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gplaces.core.types import PriceLevel

JSON = dict[str, Any]


def _obj(d: JSON, key: str) -> JSON:
    v = d.get(key)
    if v is None:
        return {}
    if not isinstance(v, dict):
        raise TypeError(f"{key}: expected an object, got {type(v).__name__}")
    return v


def _seq(d: JSON, key: str) -> list:
    v = d.get(key)
    if v is None:
        return []
    if not isinstance(v, list):
        raise TypeError(f"{key}: expected an array, got {type(v).__name__}")
    return v


def _int(d: JSON, key: str) -> int:
    v = d.get(key)
    if v is None:
        return 0
    # JSON has one number type; only whole, finite values fit an int field
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{key}: expected an integer, got {v!r}")
    return v


def _strs(d: JSON, key: str) -> list[str]:
    return [str(s) for s in _seq(d, key)]


@dataclass(frozen=True)
class AddressComponent:
    long_name: str = ""
    short_name: str = ""
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, d: JSON) -> AddressComponent:
        return cls(
            long_name=d.get("long_name") or "",
            short_name=d.get("short_name") or "",
            types=_strs(d, "types"),
        )


@dataclass(frozen=True)
class LatLng:
    lat: float = 0.0
    lng: float = 0.0

    @classmethod
    def from_json(cls, d: JSON) -> LatLng:
        return cls(lat=float(d.get("lat") or 0.0), lng=float(d.get("lng") or 0.0))


@dataclass(frozen=True)
class Viewport:
    northeast: LatLng
    southwest: LatLng


@dataclass(frozen=True)
class Geometry:
    location: LatLng = field(default_factory=LatLng)
    viewport: Viewport | None = None

    @classmethod
    def from_json(cls, d: JSON) -> Geometry:
        vp = d.get("viewport")
        return cls(
            location=LatLng.from_json(_obj(d, "location")),
            viewport=Viewport(
                northeast=LatLng.from_json(_obj(vp, "northeast")),
                southwest=LatLng.from_json(_obj(vp, "southwest")),
            )
            if vp
            else None,
        )


@dataclass(frozen=True)
class DayTime:
    """``day`` is 0-6 starting on Sunday, ``time`` is hhmm in the place's zone."""

    day: int = 0
    time: str = ""

    @classmethod
    def from_json(cls, d: JSON) -> DayTime:
        return cls(day=_int(d, "day"), time=d.get("time") or "")


@dataclass(frozen=True)
class Period:
    # an always-open place has a single period opening Sunday 0000 and no close
    open: DayTime
    close: DayTime | None = None

    @classmethod
    def from_json(cls, d: JSON) -> Period:
        close = d.get("close")
        return cls(
            open=DayTime.from_json(_obj(d, "open")),
            close=DayTime.from_json(close) if close else None,
        )


@dataclass(frozen=True)
class OpeningHours:
    open_now: bool = False
    periods: list[Period] = field(default_factory=list)
    weekday_text: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, d: JSON) -> OpeningHours:
        return cls(
            open_now=bool(d.get("open_now")),
            periods=[Period.from_json(p) for p in _seq(d, "periods")],
            weekday_text=_strs(d, "weekday_text"),
        )


@dataclass(frozen=True)
class Photo:
    photo_reference: str = ""
    height: int = 0
    width: int = 0
    html_attributions: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, d: JSON) -> Photo:
        return cls(
            photo_reference=d.get("photo_reference") or "",
            height=_int(d, "height"),
            width=_int(d, "width"),
            html_attributions=_strs(d, "html_attributions"),
        )


@dataclass(frozen=True)
class AspectRating:
    type: str = ""
    rating: int = 0

    @classmethod
    def from_json(cls, d: JSON) -> AspectRating:
        return cls(type=d.get("type") or "", rating=_int(d, "rating"))


@dataclass(frozen=True)
class Review:
    author_name: str = ""
    author_url: str = ""
    language: str = ""
    rating: int = 0
    text: str = ""
    time: int = 0
    aspects: list[AspectRating] = field(default_factory=list)

    @classmethod
    def from_json(cls, d: JSON) -> Review:
        return cls(
            author_name=d.get("author_name") or "",
            author_url=d.get("author_url") or "",
            language=d.get("language") or "",
            rating=_int(d, "rating"),
            text=d.get("text") or "",
            time=_int(d, "time"),
            aspects=[AspectRating.from_json(a) for a in _seq(d, "aspects")],
        )


@dataclass(frozen=True)
class AltID:
    place_id: str = ""
    scope: str = ""

    @classmethod
    def from_json(cls, d: JSON) -> AltID:
        return cls(place_id=d.get("place_id") or "", scope=d.get("scope") or "")


@dataclass(frozen=True)
class PlaceDetails:
    """A place as returned by search results and Place Details.

    Search results carry a subset of these fields; missing ones keep their
    defaults. ``price_level`` stays ``None`` when the place has none.
    """

    place_id: str = ""
    name: str = ""
    address_components: list[AddressComponent] = field(default_factory=list)
    formatted_address: str = ""
    formatted_phone_number: str = ""
    international_phone_number: str = ""
    geometry: Geometry = field(default_factory=Geometry)
    icon: str = ""
    opening_hours: OpeningHours | None = None
    permanently_closed: bool = False
    business_status: str = ""
    photos: list[Photo] = field(default_factory=list)
    scope: str = ""
    alt_ids: list[AltID] = field(default_factory=list)
    price_level: PriceLevel | None = None
    rating: float = 0.0
    user_ratings_total: int = 0
    reviews: list[Review] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    url: str = ""
    utc_offset: int = 0
    vicinity: str = ""
    website: str = ""
    aspects: list[AspectRating] = field(default_factory=list)
    zagat_selected: bool = False

    @classmethod
    def from_json(cls, d: JSON) -> PlaceDetails:
        if not isinstance(d, dict):
            raise TypeError(f"expected a place object, got {type(d).__name__}")
        hours = d.get("opening_hours")
        price = d.get("price_level")
        return cls(
            place_id=d.get("place_id") or "",
            name=d.get("name") or "",
            address_components=[
                AddressComponent.from_json(c) for c in _seq(d, "address_components")
            ],
            formatted_address=d.get("formatted_address") or "",
            formatted_phone_number=d.get("formatted_phone_number") or "",
            international_phone_number=d.get("international_phone_number") or "",
            geometry=Geometry.from_json(_obj(d, "geometry")),
            icon=d.get("icon") or "",
            opening_hours=OpeningHours.from_json(hours) if hours is not None else None,
            # older payloads spell it "permenantly_closed"
            permanently_closed=bool(
                d.get("permanently_closed") or d.get("permenantly_closed")
            ),
            business_status=d.get("business_status") or "",
            photos=[Photo.from_json(p) for p in _seq(d, "photos")],
            scope=d.get("scope") or "",
            alt_ids=[AltID.from_json(a) for a in _seq(d, "alt_ids")],
            price_level=PriceLevel(price) if price is not None else None,
            rating=float(d.get("rating") or 0.0),
            user_ratings_total=_int(d, "user_ratings_total"),
            reviews=[Review.from_json(r) for r in _seq(d, "reviews")],
            types=_strs(d, "types"),
            url=d.get("url") or "",
            utc_offset=_int(d, "utc_offset"),
            vicinity=d.get("vicinity") or "",
            website=d.get("website") or "",
            aspects=[AspectRating.from_json(a) for a in _seq(d, "aspects")],
            zagat_selected=bool(d.get("zagat_selected")),
        )


@dataclass(frozen=True)
class SearchResponse:
    status: str
    results: list[PlaceDetails] = field(default_factory=list)
    error_message: str = ""
    html_attributions: list[str] = field(default_factory=list)
    # empty when there is no further page
    next_page_token: str = ""

    @classmethod
    def from_json(cls, d: Any) -> SearchResponse:
        if not isinstance(d, dict):
            raise TypeError(f"expected a JSON object, got {type(d).__name__}")
        return cls(
            status=d.get("status") or "",
            results=[PlaceDetails.from_json(r) for r in _seq(d, "results")],
            error_message=d.get("error_message") or "",
            html_attributions=_strs(d, "html_attributions"),
            next_page_token=d.get("next_page_token") or "",
        )


@dataclass(frozen=True)
class DetailsResponse:
    status: str
    result: PlaceDetails = field(default_factory=PlaceDetails)
    error_message: str = ""
    html_attributions: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, d: Any) -> DetailsResponse:
        if not isinstance(d, dict):
            raise TypeError(f"expected a JSON object, got {type(d).__name__}")
        return cls(
            status=d.get("status") or "",
            result=PlaceDetails.from_json(_obj(d, "result")),
            error_message=d.get("error_message") or "",
            html_attributions=_strs(d, "html_attributions"),
        )
