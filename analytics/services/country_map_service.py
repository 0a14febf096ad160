"""Business logic for the per-country ride experience map.

The output feeds a geo chart directly, so key presence is part of the
contract: apart from ``rides_count``, a country code only appears in a
category when its value is strictly positive.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from config import require_country_map_policy
from core.exceptions import AmbiguousCountryError
from trips import experience
from trips.experience import NEGATIVE, POSITIVE, Experience
from trips.models import Trip

logger = logging.getLogger(__name__)

RIDES_COUNT = "rides_count"
GOOD_AND_VERY_GOOD = "good_and_very_good"
BAD_AND_VERY_BAD = "bad_and_very_bad"
GOOD_XP_RATIO = "good_xp_ratio"

CountryMap = dict[str, dict[str, int | float]]


def _ride_experience(ride: Any) -> Experience | None:
    """Read the experience of a Ride model, a mapping or a bare label."""
    if ride is None or isinstance(ride, Experience | str):
        label = ride
    elif isinstance(ride, Mapping):
        label = ride.get("experience")
    else:
        label = getattr(ride, "experience", None)

    if label is None or label == "":
        return None
    return experience.parse(label)


class CountryMapService:
    """Reduce trips into sparse per-country ride counts and ratios."""

    @staticmethod
    def build(entries: Iterable[tuple[str, Iterable[Any]]]) -> CountryMap:
        """Aggregate ``(country_code, rides)`` pairs in a single pass.

        Args:
            entries: One pair per trip. Rides may be Ride models, mappings with
                an ``experience`` key, or experience labels.

        Returns:
            Mapping of category name to ``{country_code: value}``.

        Raises:
            UnknownLabelError: If a ride carries a label outside the scale.
        """
        rides_count: dict[str, int] = {}
        per_label: dict[Experience, Counter[str]] = {
            label: Counter() for label in reversed(Experience)
        }
        positive: Counter[str] = Counter()
        negative: Counter[str] = Counter()

        for code, rides in entries:
            rides_count.setdefault(code, 0)
            for ride in rides:
                rides_count[code] += 1
                label = _ride_experience(ride)
                if label is None:
                    continue
                per_label[label][code] += 1
                if label in POSITIVE:
                    positive[code] += 1
                elif label in NEGATIVE:
                    negative[code] += 1

        result: CountryMap = {RIDES_COUNT: rides_count}
        for label, counts in per_label.items():
            result[label.value] = _positive_only(counts)
        result[GOOD_AND_VERY_GOOD] = _positive_only(positive)
        result[BAD_AND_VERY_BAD] = _positive_only(negative)
        result[GOOD_XP_RATIO] = {
            code: good / rides_count[code]
            for code, good in result[GOOD_AND_VERY_GOOD].items()
        }

        logger.debug(
            "Built country map for %d countries (%d rides)",
            len(rides_count),
            sum(rides_count.values()),
        )
        return result

    @staticmethod
    def resolve_country_codes(trip: Trip, policy: str | None = None) -> list[str]:
        """Country codes that label a trip's rides.

        Under ``primary`` distances are summed per country code and the
        country with the longest total wins.

        Args:
            trip: Trip with its country distances loaded.
            policy: ``primary``, ``all`` or ``reject``; defaults to the
                ``COUNTRY_MAP_POLICY`` setting.

        Raises:
            AmbiguousCountryError: Under ``reject`` when the trip spans more
                than one country.
            ConfigurationError: If the policy name is invalid.
        """
        policy = require_country_map_policy(policy)

        totals: dict[str, float] = {}
        for row in trip.country_distances:
            totals[row.country_code] = totals.get(row.country_code, 0.0) + row.distance
        codes = list(totals)

        if len(codes) <= 1 or policy == "all":
            return codes

        if policy == "reject":
            msg = f"Trip {trip.id} spans several countries: {', '.join(codes)}"
            logger.warning(msg)
            raise AmbiguousCountryError(msg, {"trip_id": trip.id, "countries": codes})

        # max() keeps the first country among equal totals
        return [max(codes, key=totals.__getitem__)]

    @staticmethod
    def data_for_country_map(
        trips: Iterable[Trip],
        policy: str | None = None,
    ) -> CountryMap:
        """Country map for already-loaded trips.

        Trips without any country distance are skipped. The policy is
        validated before any trip is read.
        """
        policy = require_country_map_policy(policy)
        return CountryMapService.build(CountryMapService._entries(trips, policy))

    @staticmethod
    def _entries(
        trips: Iterable[Trip],
        policy: str,
    ) -> Iterator[tuple[str, list[Any]]]:
        for trip in trips:
            codes = CountryMapService.resolve_country_codes(trip, policy)
            if not codes:
                logger.debug("Skipping trip %s without country distances", trip.id)
                continue
            for code in codes:
                yield code, trip.rides


def _positive_only(counts: Mapping[str, int]) -> dict[str, int]:
    return {code: count for code, count in counts.items() if count > 0}


__all__ = [
    "BAD_AND_VERY_BAD",
    "GOOD_AND_VERY_GOOD",
    "GOOD_XP_RATIO",
    "RIDES_COUNT",
    "CountryMap",
    "CountryMapService",
]
