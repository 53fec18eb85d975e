from __future__ import annotations

from gplaces.core.errors import ApiError
from gplaces.core.types import Status

# legacy spelling still returned by some older endpoints
_UNKNOWN_STATUSES = {Status.UNKNOWN_ERROR.value, "UNKNOWN"}


def _status_of(err: object) -> str | None:
    if isinstance(err, ApiError):
        return err.status
    return None


def is_unknown(err: object) -> bool:
    """Server-side error; trying again may succeed."""
    return _status_of(err) in _UNKNOWN_STATUSES


def is_zero_results(err: object) -> bool:
    """The search succeeded but matched nothing, e.g. a remote latlng."""
    return _status_of(err) == Status.ZERO_RESULTS.value


def is_over_query_limit(err: object) -> bool:
    return _status_of(err) == Status.OVER_QUERY_LIMIT.value


def is_request_denied(err: object) -> bool:
    """Usually a missing or invalid key."""
    return _status_of(err) == Status.REQUEST_DENIED.value


def is_invalid_request(err: object) -> bool:
    """Usually a missing required parameter."""
    return _status_of(err) == Status.INVALID_REQUEST.value


def is_not_found(err: object) -> bool:
    """The referenced place is not in the Places database."""
    return _status_of(err) == Status.NOT_FOUND.value
