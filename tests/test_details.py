import pytest
import requests

from gplaces.core.errors import ApiError, BadResponseError, DecodeError
from gplaces.core.status import is_invalid_request
from gplaces.core.types import FeatureType, PriceLevel

PLACE_ID = "ChIJLU7jZClu5kcR4PcOOO6p3I0"


def test_details_query(service):
    call = service.details(PLACE_ID)
    call.language = "en"
    call.extensions = "review_summary"
    assert call.query() == (
        f"extensions=review_summary&key=testkey&language=en&placeid={PLACE_ID}"
    )


def test_details_query_minimal(service):
    assert service.details("notok").query() == "key=testkey&placeid=notok"


def test_details_ok(service, session, fixture):
    session.add(fixture("ok"))
    call = service.details(PLACE_ID)
    call.language = "en"

    resp = call.do()

    assert session.path() == "/maps/api/place/details/json"
    assert session.query() == {"key": "testkey", "language": "en", "placeid": PLACE_ID}
    assert resp.status == "OK"
    assert resp.html_attributions == [
        'Listings by <a href="http://www.example.com/">Example Co</a>'
    ]

    place = resp.result
    assert place.place_id == PLACE_ID
    assert place.name == "Eiffel Tower"
    assert place.price_level is PriceLevel.MODERATE
    assert place.rating == 4.6
    assert place.user_ratings_total == 275000
    assert place.geometry.location.lat == 48.8583701
    assert place.geometry.viewport.northeast.lng == 2.295830280291502
    assert place.address_components[1].long_name == "Paris"
    assert place.opening_hours.open_now is True
    assert place.opening_hours.periods[0].close.time == "2345"
    assert place.opening_hours.periods[1].close is None
    assert place.opening_hours.weekday_text == ["Monday: 9:30 AM – 11:45 PM"]
    assert place.photos[0].photo_reference == "CmRaAAAA"
    assert place.photos[0].width == 4032
    assert place.alt_ids[0].scope == "APP"
    assert place.reviews[0].aspects[0].type == "overall"
    assert place.reviews[0].time == 1500000000
    assert place.utc_offset == 120
    assert place.website == "https://www.toureiffel.paris/"
    assert place.business_status == "OPERATIONAL"
    assert place.zagat_selected is True
    assert "point_of_interest" in place.types


def test_details_invalid_request(service, session, fixture):
    session.add(fixture("invalid_request"))
    with pytest.raises(ApiError) as ei:
        service.details("invalid_request").do()
    assert str(ei.value) == "INVALID_REQUEST"
    assert is_invalid_request(ei.value)


def test_details_non_ok_http_status(service, session):
    session.add("", status_code=400)
    with pytest.raises(BadResponseError) as ei:
        service.details("notok").do()
    assert str(ei.value) == "bad response 400: "


def test_details_invalid_json(service, session, fixture):
    session.add(fixture("invalid_json"))
    with pytest.raises(DecodeError, match="expected a JSON object, got str"):
        service.details("invalid_json").do()


def test_details_communication_problem(service, session):
    session.add_error(requests.ConnectTimeout("timed out"))
    with pytest.raises(requests.ConnectTimeout):
        service.details("wrong").do()


def test_search_result_types_match_feature_type(service, session, fixture):
    session.add(fixture("nearby_page1"))
    call = service.text_search("coffee")
    first = call.do().results[0]
    assert FeatureType.CAFE in first.types
    assert first.opening_hours is None
    assert first.price_level is PriceLevel.MODERATE
