import json

import pytest
import requests

from gplaces.core.errors import ApiError, ValidationError
from gplaces.interface import cli
from gplaces.utils.config import Settings


@pytest.fixture
def container(monkeypatch, service):
    settings = Settings(api_key="testkey", page_delay_sec=0, max_pages=3)
    monkeypatch.setattr(cli, "build_container", lambda: (settings, service))
    return settings, service


def test_nearby_prints_all_pages(container, session, fixture, capsys):
    session.add(fixture("nearby_page1"))
    session.add(fixture("nearby_page2"))

    code = cli.main(["nearby", "--location", "37.7833,-122.4167", "--radius", "500", "--type", "cafe"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Blue Bottle Coffee",
        "Sightglass Coffee",
        "Philz Coffee",
    ]
    assert session.query(0)["types"] == "cafe"
    assert session.closed


def test_textsearch_with_location_and_price(container, session, fixture):
    session.add(fixture("nearby_page2"))
    code = cli.main(
        ["textsearch", "coffee", "--location=-33.86,151.19", "--radius", "100", "--min-price", "0"]
    )
    assert code == 0
    q = session.query(0)
    assert q["query"] == "coffee"
    assert q["location"] == "-33.860000,151.190000"
    assert q["minprice"] == "0"


def test_zero_results(container, session, fixture, capsys):
    session.add(fixture("zero_results"))
    code = cli.main(["radar", "--location", "1,2", "--radius", "100"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "no results"


def test_validation_error_exits_1(container, session, capsys):
    code = cli.main(["nearby", "--location", "1,2"])
    assert code == 1
    assert "radius must be specified" in capsys.readouterr().err
    assert session.calls == []


def test_details_json(container, session, fixture, capsys):
    session.add(fixture("ok"))
    code = cli.main(["details", "ChIJLU7jZClu5kcR4PcOOO6p3I0", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "Eiffel Tower"
    assert data[0]["price_level"] == 2


def test_search_with_details(container, session, fixture, capsys):
    session.add(fixture("nearby_page2"))
    session.add(fixture("ok"))
    code = cli.main(["textsearch", "eiffel", "--details"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "Eiffel Tower"
    assert session.path(1).endswith("/details/json")


@pytest.mark.parametrize(
    "exc, give_up",
    [
        (requests.ConnectionError("refused"), False),
        (requests.Timeout("slow"), False),
        (ApiError("UNKNOWN_ERROR"), False),
        (ApiError("OVER_QUERY_LIMIT"), True),
        (ApiError("ZERO_RESULTS"), True),
        (ValidationError("radius must be specified"), True),
    ],
)
def test_retry_policy(exc, give_up):
    assert cli._give_up(exc) is give_up
