from __future__ import annotations

from gplaces.core.ports import HttpClient

from .details import DetailsCall
from .search import NearbyCall, RadarSearchCall, TextSearchCall

BASE_URL = "https://maps.googleapis.com/maps/api/place"


class Service:
    """Entry point for the Places Web Service.

    Holds an already configured HTTP client (e.g. ``requests.Session``) and
    the API key, and hands out one call object per request. ``timeout`` is
    passed through to ``client.get``; ``None`` leaves it to the client.
    """

    def __init__(self, client: HttpClient, key: str, *, timeout: float | None = None):
        self.client = client
        self.key = key
        self.timeout = timeout
        self.url = BASE_URL

    def set_url(self, url: str) -> None:
        """Point the service at another base URL, e.g. a local test server."""
        self.url = url.rstrip("/")

    def nearby(self, lat: float, lng: float) -> NearbyCall:
        return NearbyCall(self, lat, lng)

    def text_search(self, query: str) -> TextSearchCall:
        return TextSearchCall(self, query)

    def radar_search(self, radius: float, lat: float, lng: float) -> RadarSearchCall:
        return RadarSearchCall(self, radius, lat, lng)

    def details(self, place_id: str) -> DetailsCall:
        return DetailsCall(self, place_id)
