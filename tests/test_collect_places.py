import pytest

from gplaces.app.use_cases.collect_places import CollectPlacesUseCase
from gplaces.core.errors import ApiError
from gplaces.core.status import is_zero_results


def make_use_case(**kw):
    sleeps = []
    uc = CollectPlacesUseCase(sleep=sleeps.append, **kw)
    return uc, sleeps


def test_follows_next_page_token(service, session, fixture):
    session.add(fixture("nearby_page1"))
    session.add(fixture("nearby_page2"))
    call = service.nearby(37.7833, -122.4167)
    call.radius = 500
    call.keyword = "coffee"

    uc, sleeps = make_use_case(page_delay=2.0)
    out = uc.run(call)

    assert out.pages == 2
    assert [p.name for p in out.results] == [
        "Blue Bottle Coffee",
        "Sightglass Coffee",
        "Philz Coffee",
    ]
    assert sleeps == [2.0]

    first, second = session.query(0), session.query(1)
    assert first["keyword"] == "coffee"
    assert set(second) == {"key", "location", "pagetoken"}
    assert second["pagetoken"] == "CpQCAgEAAFxg8o"


def test_single_page_does_not_sleep(service, session, fixture):
    session.add(fixture("nearby_page2"))
    uc, sleeps = make_use_case()
    out = uc.run(service.text_search("coffee"))
    assert out.pages == 1
    assert len(out.results) == 1
    assert sleeps == []


def test_max_pages(service, session, fixture):
    session.add(fixture("nearby_page1"))
    uc, sleeps = make_use_case(max_pages=1)
    out = uc.run(service.text_search("coffee"))
    assert out.pages == 1
    assert len(session.calls) == 1
    assert sleeps == []


def test_zero_results_propagates(service, session, fixture):
    session.add(fixture("zero_results"))
    uc, _ = make_use_case()
    with pytest.raises(ApiError) as ei:
        uc.run(service.text_search("nowhere"))
    assert is_zero_results(ei.value)


def test_custom_fetch_is_used(service, session, fixture):
    session.add(fixture("nearby_page2"))
    fetched = []

    def fetch(call):
        fetched.append(call)
        return call.do()

    call = service.text_search("coffee")
    uc, _ = make_use_case(fetch=fetch)
    uc.run(call)
    assert fetched == [call]
