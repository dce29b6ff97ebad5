#!/usr/bin/env python3
"""
Eventbrite organizer and event models.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Organizer(BaseModel):
    """A configured organizer account."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class EventText(BaseModel):
    """Localized text object reduced to its plain text."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class EventTime(BaseModel):
    model_config = ConfigDict(extra="ignore")

    utc: datetime

    @field_validator("utc")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Address(BaseModel):
    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    localized_address_display: Optional[str] = None


class Venue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    address: Optional[Address] = None


class Logo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None


class Event(BaseModel):
    """Event as returned by the organization/organizer events endpoints."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: EventText = Field(default_factory=EventText)
    description: EventText = Field(default_factory=EventText)
    start: EventTime
    end: Optional[EventTime] = None
    online_event: bool = False
    status: str = ""
    listed: Optional[bool] = None
    organizer_id: str = ""
    venue: Optional[Venue] = None
    url: Optional[str] = None
    logo: Optional[Logo] = None

    @field_validator("id", "organizer_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("online_event", mode="before")
    @classmethod
    def _none_to_false(cls, value):
        return False if value is None else value

    @property
    def title(self) -> str:
        return self.name.text

    @property
    def summary(self) -> str:
        return self.description.text

    @property
    def starts_at(self) -> datetime:
        return self.start.utc

    @property
    def start_date(self) -> date:
        return self.start.utc.date()

    @property
    def venue_name(self) -> Optional[str]:
        return self.venue.name if self.venue else None

    @property
    def city(self) -> Optional[str]:
        """Venue city, or None when no venue address or city is present."""
        if self.venue is None or self.venue.address is None:
            return None
        return self.venue.address.city or None

    @property
    def is_visible(self) -> bool:
        return self.status == "live" and self.listed is not False


def sort_by_start(events):
    """Return events ordered by start instant; ties keep their incoming order."""
    return sorted(events, key=lambda event: event.starts_at)
