from __future__ import annotations


class PlacesError(RuntimeError):
    """Base class for errors raised by gplaces.

    Transport errors raised by the HTTP client (``requests.RequestException``
    and friends) are not wrapped and never derive from this class.
    """


class ValidationError(PlacesError, ValueError):
    """A parameter combination was rejected before any request was sent."""


class BadResponseError(PlacesError):
    """The server answered with an HTTP status other than 200."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"bad response {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(PlacesError):
    """The response body could not be decoded into the expected structure."""


class ApiError(PlacesError):
    """The response decoded fine but its ``status`` field was not OK.

    Sub-kinds are told apart by ``status``, see ``gplaces.core.status``.
    """

    def __init__(self, status: str, message: str = ""):
        super().__init__(f"{status}: {message}" if message else status)
        self.status = status
        self.message = message
