#!/usr/bin/env python3
"""
Pure filter and facet derivations over a loaded event collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence

from .models import Event, Organizer

VIRTUAL = "virtual"
IN_PERSON = "in-person"
EVENT_TYPES: FrozenSet[str] = frozenset({VIRTUAL, IN_PERSON})

UNKNOWN_ORGANIZATION = "Unknown Organization"


@dataclass(frozen=True)
class EventFilters:
    """User-selected filter state.

    ``organizations`` of None selects every organizer. ``locations`` of None
    means no location filter is active; an empty set is an active filter that
    admits no in-person event.
    """

    organizations: Optional[FrozenSet[str]] = None
    event_types: FrozenSet[str] = EVENT_TYPES
    locations: Optional[FrozenSet[str]] = None
    search: str = ""


@dataclass(frozen=True)
class EventTypeCounts:
    virtual: int = 0
    in_person: int = 0


@dataclass(frozen=True)
class OrganizerDirectory:
    """Organizer id to display name lookup, built once per load."""

    names: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_organizers(cls, organizers: Iterable[Organizer]) -> "OrganizerDirectory":
        return cls({organizer.id: organizer.name for organizer in organizers})

    def name_for(self, organizer_id: str) -> str:
        return self.names.get(organizer_id, UNKNOWN_ORGANIZATION)


def derive_locations(events: Iterable[Event]) -> List[str]:
    """Distinct, alphabetically sorted cities of in-person events with a venue city."""
    return sorted({event.city for event in events if not event.online_event and event.city})


def matches_organization(event: Event, organizations: Optional[FrozenSet[str]]) -> bool:
    if organizations is None:
        return True
    return event.organizer_id in organizations


def matches_event_type(event: Event, event_types: FrozenSet[str]) -> bool:
    if event.online_event:
        return VIRTUAL in event_types
    return IN_PERSON in event_types


def matches_location(event: Event, locations: Optional[FrozenSet[str]]) -> bool:
    # Virtual events are never location-filtered.
    if event.online_event or locations is None:
        return True
    city = event.city
    return city is not None and city in locations


def matches_search(event: Event, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    candidates = (event.title, event.summary, event.venue_name, event.city)
    return any(value and needle in value.lower() for value in candidates)


def apply_filters(events: Sequence[Event], filters: EventFilters) -> List[Event]:
    """Organization, event type, location, then search; all must hold."""
    return [
        event
        for event in events
        if matches_organization(event, filters.organizations)
        and matches_event_type(event, filters.event_types)
        and matches_location(event, filters.locations)
        and matches_search(event, filters.search)
    ]


def count_event_types(events: Sequence[Event], filters: EventFilters) -> EventTypeCounts:
    """Virtual/in-person counts under the organization and location filters only."""
    scoped = [
        event
        for event in events
        if matches_organization(event, filters.organizations)
        and matches_location(event, filters.locations)
    ]
    virtual = sum(1 for event in scoped if event.online_event)
    return EventTypeCounts(virtual=virtual, in_person=len(scoped) - virtual)


def group_by_day(events: Iterable[Event]) -> Dict[date, List[Event]]:
    """Group events by UTC start date, preserving incoming order."""
    grouped: Dict[date, List[Event]] = {}
    for event in events:
        grouped.setdefault(event.start_date, []).append(event)
    return grouped
