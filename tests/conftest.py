import sys
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from trips.models import CountryDistance, Ride, Traveller, Trip  # noqa: E402

DEPARTURE = datetime(2011, 12, 7, 10, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRY_MAP_POLICY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def make_trip() -> Callable[..., Trip]:
    """Build a valid trip: Cologne to Berlin, 3 hours, no rides."""

    def _make_trip(
        *,
        hours: float = 3,
        rides: list[dict[str, Any]] | None = None,
        countries: list[tuple[str, float]] | None = None,
        **overrides: Any,
    ) -> Trip:
        data: dict[str, Any] = {
            "id": 1,
            "from": "Cologne",
            "to": "Berlin",
            "departure": DEPARTURE,
            "arrival": DEPARTURE + timedelta(hours=hours),
            "travelling_with": ["alone"],
            "user": Traveller(username="malte", date_of_birth=datetime(1985, 3, 1).date()),
            "rides": [Ride(**ride) for ride in rides or []],
            "country_distances": [
                CountryDistance(country=code, country_code=code, distance=distance)
                for code, distance in countries or []
            ],
        }
        data.update(overrides)
        return Trip(**data)

    return _make_trip
