#!/usr/bin/env python3
"""
Pydantic schemas for API requests and responses.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..services.events.feed import FeedSnapshot
from ..services.events.filters import group_by_day
from ..services.events.models import Event


class OrganizerOut(BaseModel):
    id: str
    name: str


class VenueOut(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None


class EventOut(BaseModel):
    id: str
    title: str
    description: str
    start: datetime
    end: Optional[datetime] = None
    online_event: bool
    organizer_id: str
    organizer_name: str
    venue: Optional[VenueOut] = None
    url: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event, organizer_name: str) -> "EventOut":
        venue = None
        if event.venue is not None:
            venue = VenueOut(name=event.venue_name, city=event.city)
        return cls(
            id=event.id,
            title=event.title,
            description=event.summary,
            start=event.starts_at,
            end=event.end.utc if event.end else None,
            online_event=event.online_event,
            organizer_id=event.organizer_id,
            organizer_name=organizer_name,
            venue=venue,
            url=event.url,
            image_url=event.logo.url if event.logo else None,
        )


class EventCounts(BaseModel):
    virtual: int
    in_person: int


class EventListResponse(BaseModel):
    events: List[EventOut]
    total_events: int
    counts: EventCounts
    locations: List[str]
    calendar: Optional[Dict[date, List[str]]] = None
    error: Optional[str] = None
    loading: bool = False
    no_organizations: bool = False
    loaded_at: Optional[datetime] = None

    @classmethod
    def from_snapshot(cls, snapshot: FeedSnapshot, *, calendar: bool = False) -> "EventListResponse":
        directory = snapshot.directory
        events = [EventOut.from_event(event, directory.name_for(event.organizer_id)) for event in snapshot.events]
        grouped = None
        if calendar:
            grouped = {
                day: [event.id for event in day_events]
                for day, day_events in group_by_day(snapshot.events).items()
            }
        return cls(
            events=events,
            total_events=len(events),
            counts=EventCounts(virtual=snapshot.counts.virtual, in_person=snapshot.counts.in_person),
            locations=snapshot.locations,
            calendar=grouped,
            error=snapshot.error,
            loading=snapshot.loading,
            no_organizations=snapshot.no_organizations,
            loaded_at=snapshot.loaded_at,
        )
