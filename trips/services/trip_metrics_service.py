"""Derived per-trip statistics.

Every metric is a pure function of one Trip and its loaded rides. Missing
inputs yield ``None`` ("nothing to display") instead of raising, so a
partially filled trip degrades the display rather than the request.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from config import HITCHABILITY_PRECISION, KMH_PER_METER_PER_SECOND
from date_utils import years_between
from trips import experience
from trips.experience import Experience
from trips.models import Trip

logger = logging.getLogger(__name__)


class TripMetrics(BaseModel):
    """Snapshot of every derived metric for one trip."""

    duration: timedelta | None = None
    kmh: int | None = None
    average_speed: str | None = None
    gmaps_difference: int | None = None
    hitchability: float | None = None
    total_waiting_time: str | None = None
    overall_experience: Experience | None = None
    age: int | None = None

    model_config = ConfigDict(frozen=True)


def _round_half_away_from_zero(value: float, digits: int = 0) -> Decimal:
    # str() keeps the shortest repr, so 1.125 rounds as written rather than
    # as its binary approximation.
    step = Decimal(1).scaleb(-digits)
    return Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP)


class TripMetricsService:
    """Stateless metric computations over a single trip."""

    @staticmethod
    def duration(trip: Trip) -> timedelta | None:
        """Time between departure and arrival. Negative if the two are swapped."""
        if trip.departure is None or trip.arrival is None:
            return None
        return trip.arrival - trip.departure

    @staticmethod
    def _duration_seconds(trip: Trip) -> float | None:
        span = TripMetricsService.duration(trip)
        return span.total_seconds() if span is not None else None

    @staticmethod
    def _speed(trip: Trip) -> float | None:
        distance = trip.distance
        seconds = TripMetricsService._duration_seconds(trip)
        if distance is None or seconds is None:
            logger.debug("Trip %s lacks distance or duration; no speed", trip.id)
            return None
        if seconds == 0:
            logger.debug("Trip %s has zero duration; no speed", trip.id)
            return None
        # Scale before dividing so exact speeds do not truncate to N - 1.
        return distance * KMH_PER_METER_PER_SECOND / seconds

    @staticmethod
    def kmh(trip: Trip) -> int | None:
        """Whole kilometres per hour, fractional part dropped.

        50 km covered in 3 hours is 16 km/h.
        """
        speed = TripMetricsService._speed(trip)
        return int(speed) if speed is not None else None

    @staticmethod
    def average_speed(trip: Trip) -> str | None:
        """Speed rounded to the nearest km/h, formatted as ``"<N> kmh"``."""
        speed = TripMetricsService._speed(trip)
        if speed is None:
            return None
        return f"{int(_round_half_away_from_zero(speed))} kmh"

    @staticmethod
    def gmaps_difference(trip: Trip) -> int | None:
        """Seconds taken beyond the routing estimate; negative when faster."""
        estimate = trip.gmaps_duration
        seconds = TripMetricsService._duration_seconds(trip)
        if estimate is None or seconds is None:
            return None
        return int(seconds - estimate)

    @staticmethod
    def hitchability(trip: Trip) -> float | None:
        """Actual duration over the routing estimate, to two decimals.

        Values above 1 mean the hitchhiker was slower than a car driving the
        same route.
        """
        estimate = trip.gmaps_duration
        seconds = TripMetricsService._duration_seconds(trip)
        if estimate is None or seconds is None:
            return None
        if estimate == 0:
            logger.debug("Trip %s has a zero routing estimate", trip.id)
            return None
        return float(
            _round_half_away_from_zero(seconds / estimate, HITCHABILITY_PRECISION)
        )

    @staticmethod
    def total_waiting_time(trip: Trip) -> str | None:
        """Sum of ride waiting times, formatted as ``"<sum> minutes"``.

        The sum is all-or-nothing: a single ride without a recorded waiting
        time leaves the total undefined.
        """
        if not trip.rides:
            return None

        total = 0
        for ride in trip.rides:
            if ride.waiting_time is None:
                logger.debug(
                    "Ride %s of trip %s has no waiting time; total undefined",
                    ride.id,
                    trip.id,
                )
                return None
            total += ride.waiting_time
        return f"{total} minutes"

    @staticmethod
    def overall_experience(trip: Trip) -> Experience | None:
        """Worst recorded ride experience; one bad leg dominates the trip."""
        recorded = [ride.experience for ride in trip.rides if ride.experience is not None]
        if not recorded:
            return None
        return experience.worst_of(recorded)

    @staticmethod
    def age(trip: Trip) -> int | None:
        """Age of the traveller on the day of departure."""
        born = trip.user.date_of_birth if trip.user else None
        return years_between(born, trip.departure)

    @classmethod
    def summary(cls, trip: Trip) -> TripMetrics:
        return TripMetrics(
            duration=cls.duration(trip),
            kmh=cls.kmh(trip),
            average_speed=cls.average_speed(trip),
            gmaps_difference=cls.gmaps_difference(trip),
            hitchability=cls.hitchability(trip),
            total_waiting_time=cls.total_waiting_time(trip),
            overall_experience=cls.overall_experience(trip),
            age=cls.age(trip),
        )
