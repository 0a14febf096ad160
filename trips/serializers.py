"""Serialization utilities for trip and hitchhike data."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote_plus

from config import DISPLAY_DATE_FORMAT
from core.navigation import SequenceNavigator
from trips.models import Hitchhike, Person, Trip

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _parameterize(place: str) -> str:
    """URL-escape a place name, then collapse it into a lowercase slug part."""
    escaped = quote_plus(place).lower()
    return _NON_ALNUM.sub("-", escaped).strip("-")


def trip_slug(trip: Trip) -> str:
    """
    Build the URL parameter for a trip, e.g. ``123-cologne-to-berlin``.

    City names are preferred when both are known; otherwise the raw from/to
    strings are used, which keeps escaped separators visible
    ("Berliner Str./B1" becomes ``berliner-str-2fb1``).
    """
    if trip.from_city and trip.to_city:
        origin, destination = trip.from_city, trip.to_city
    else:
        origin, destination = trip.from_location or "", trip.to_location or ""

    parts = [f"{_parameterize(origin)}-to-{_parameterize(destination)}"]
    if trip.id is not None:
        parts.insert(0, str(trip.id))
    return "-".join(parts)


def describe_person(person: Person | None) -> str:
    if person is None:
        return ""
    parts = [person.name, person.occupation, person.origin]
    return ", ".join(part for part in parts if part)


def describe_hitchhike(hitchhike: Hitchhike) -> str:
    """One-line summary: title, driver, waiting time and ride duration."""
    parts = [hitchhike.title or "", describe_person(hitchhike.person)]
    if hitchhike.waiting_time is not None:
        parts.append(f"waiting time: {hitchhike.waiting_time} minutes")
    if hitchhike.duration is not None:
        parts.append(f"duration of ride: {_format_number(hitchhike.duration)} hours")
    return ", ".join(part for part in parts if part)


def hitchhike_is_empty(hitchhike: Hitchhike) -> bool:
    """True when nothing worth showing has been recorded for the lift."""
    values = [
        hitchhike.mission,
        hitchhike.waiting_time,
        hitchhike.duration,
        describe_person(hitchhike.person),
    ]
    return all(value is None or value == "" for value in values)


def hitchhike_payload(
    hitchhike: Hitchhike,
    trip: Trip,
    navigator: SequenceNavigator,
) -> dict[str, Any]:
    """JSON-ready view of a hitchhike with paging links to its neighbours."""
    person = hitchhike.person or Person()
    return {
        "title": hitchhike.title,
        "id": hitchhike.id,
        "next": navigator.next(hitchhike.id),
        "prev": navigator.prev(hitchhike.id),
        "story": hitchhike.story,
        "from": trip.from_location,
        "to": trip.to_location,
        "date": (
            trip.departure.strftime(DISPLAY_DATE_FORMAT) if trip.departure else ""
        ),
        "distance": trip.distance,
        "username": trip.user.username if trip.user else None,
        "person": person.model_dump(exclude_none=True),
    }


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
