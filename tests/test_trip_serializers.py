from datetime import UTC, datetime

from core.navigation import SequenceNavigator
from trips.models import Hitchhike, Person, Traveller
from trips.serializers import (
    describe_hitchhike,
    hitchhike_is_empty,
    hitchhike_payload,
    trip_slug,
)


def test_trip_slug_prefers_city_names(make_trip) -> None:
    trip = make_trip(id=123, from_city="Cologne", to_city="Berlin")
    assert trip_slug(trip) == "123-cologne-to-berlin"


def test_trip_slug_escapes_raw_locations(make_trip) -> None:
    trip = make_trip(
        id=123,
        **{"from": "Berliner Str./B1/B5, Hoppegarten", "to": "Warszawa"},
    )
    assert trip_slug(trip) == "123-berliner-str-2fb1-2fb5-2c-hoppegarten-to-warszawa"


def test_trip_slug_needs_both_cities(make_trip) -> None:
    trip = make_trip(id=9, from_city="Cologne", to_city=None)
    assert trip_slug(trip) == "9-cologne-to-berlin"


def test_trip_slug_without_id(make_trip) -> None:
    assert trip_slug(make_trip(id=None)) == "cologne-to-berlin"


def test_describe_hitchhike_joins_known_parts() -> None:
    hitchhike = Hitchhike(
        id=1,
        title="Truck to Poznan",
        person=Person(name="Jan", occupation="driver"),
        waiting_time=15,
        duration=2.5,
    )
    assert describe_hitchhike(hitchhike) == (
        "Truck to Poznan, Jan, driver, waiting time: 15 minutes, "
        "duration of ride: 2.5 hours"
    )


def test_describe_hitchhike_skips_blank_parts() -> None:
    hitchhike = Hitchhike(id=1, title="", duration=3.0)
    assert describe_hitchhike(hitchhike) == "duration of ride: 3 hours"


def test_hitchhike_is_empty() -> None:
    assert hitchhike_is_empty(Hitchhike(id=1, mission="", person=Person()))
    assert not hitchhike_is_empty(Hitchhike(id=1, waiting_time=0))
    assert not hitchhike_is_empty(Hitchhike(id=1, person=Person(name="Jan")))


def test_hitchhike_payload(make_trip) -> None:
    trip = make_trip(
        distance=50_000,
        departure=datetime(2009, 11, 7, 10, 0, tzinfo=UTC),
        user=Traveller(username="malte"),
    )
    hitchhike = Hitchhike(
        id=3,
        title="Lift",
        story="Long story",
        person=Person(name="Jan", age=40),
    )
    navigator = SequenceNavigator([1, 3, 7])

    payload = hitchhike_payload(hitchhike, trip, navigator)

    assert payload == {
        "title": "Lift",
        "id": 3,
        "next": 7,
        "prev": 1,
        "story": "Long story",
        "from": "Cologne",
        "to": "Berlin",
        "date": "07. Nov 2009",
        "distance": 50_000,
        "username": "malte",
        "person": {"name": "Jan", "age": 40},
    }


def test_hitchhike_payload_without_departure(make_trip) -> None:
    trip = make_trip(departure=None, user=None)
    payload = hitchhike_payload(Hitchhike(id=1), trip, SequenceNavigator([1]))
    assert payload["date"] == ""
    assert payload["username"] is None
    assert payload["person"] == {}
