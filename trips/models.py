"""Pydantic models for the trip records consumed by the statistics core.

The persistence layer owns these records; the statistics code only reads
them. Validation here rejects data-contract violations (unknown experience
labels) and normalizes timestamps so the metric functions can stay simple.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from date_utils import combine_date_and_time, parse_timestamp
from trips.experience import Experience, parse


class Traveller(BaseModel):
    """The user a trip belongs to."""

    id: int | None = None
    username: str = ""
    date_of_birth: date | None = None

    model_config = ConfigDict(extra="ignore")


class Ride(BaseModel):
    """A single hitchhiking leg within a trip."""

    id: int | None = None
    trip_id: int | None = None
    experience: Experience | None = None
    waiting_time: int | None = None  # minutes
    duration: float | None = None  # hours
    vehicle: str | None = None
    title: str | None = None
    story: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("experience", mode="before")
    @classmethod
    def validate_experience(cls, v: Any) -> Experience | None:
        """Blank values mean "not rated"; anything else must be on the scale."""
        if v is None or v == "":
            return None
        return parse(v)


class CountryDistance(BaseModel):
    """Distance a trip covered inside one country."""

    trip_id: int | None = None
    country: str = ""
    country_code: str
    distance: float = 0.0  # meters

    model_config = ConfigDict(extra="ignore")


class Person(BaseModel):
    """The driver picking up a hitchhiker."""

    name: str | None = None
    occupation: str | None = None
    origin: str | None = None
    age: int | None = None
    gender: str | None = None

    model_config = ConfigDict(extra="ignore")


class Hitchhike(BaseModel):
    """Story-oriented record of a single lift."""

    id: int
    trip_id: int | None = None
    user_id: int | None = None
    title: str | None = None
    story: str | None = None
    mission: str | None = None
    waiting_time: int | None = None  # minutes
    duration: float | None = None  # hours
    person: Person | None = None

    model_config = ConfigDict(extra="ignore")


class Trip(BaseModel):
    """Trip record with its rides and country distances loaded."""

    id: int | None = None
    from_location: str | None = Field(default=None, alias="from")
    to_location: str | None = Field(default=None, alias="to")
    from_city: str | None = None
    to_city: str | None = None
    departure: datetime | None = None
    arrival: datetime | None = None
    distance: float | None = None  # meters
    gmaps_duration: float | None = None  # seconds
    travelling_with: list[str] = Field(default_factory=list)
    rides: list[Ride] = Field(default_factory=list)
    country_distances: list[CountryDistance] = Field(default_factory=list)
    user: Traveller | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def combine_split_timestamps(cls, data: Any) -> Any:
        """Merge ``departure_time``/``arrival_time`` form fields into timestamps."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for field_name in ("departure", "arrival"):
            time_part = data.pop(f"{field_name}_time", None)
            if time_part:
                data[field_name] = combine_date_and_time(data.get(field_name), time_part)
        return data

    @field_validator("departure", "arrival", mode="before")
    @classmethod
    def parse_datetime_fields(cls, v: Any) -> datetime | None:
        """Parse datetime fields using the centralized date_utils."""
        if v is None:
            return None
        return parse_timestamp(v)


__all__ = ["CountryDistance", "Hitchhike", "Person", "Ride", "Traveller", "Trip"]
