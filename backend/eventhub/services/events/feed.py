#!/usr/bin/env python3
"""
Load/retry state for the aggregated event collection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .aggregator import EventAggregator
from .filters import (
    EventFilters,
    EventTypeCounts,
    OrganizerDirectory,
    apply_filters,
    count_event_types,
    derive_locations,
)
from .models import Event, Organizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedSnapshot:
    events: List[Event]
    counts: EventTypeCounts
    locations: List[str]
    directory: OrganizerDirectory
    error: Optional[str]
    loading: bool
    no_organizations: bool
    loaded_at: Optional[datetime]


class EventFeed:
    """Holds the most recent aggregation result for a fixed organizer roster.

    Each load replaces the collection wholesale. When loads overlap, only the
    most recently started one applies its result.
    """

    def __init__(self, aggregator: EventAggregator, organizers: Sequence[Organizer]):
        self._aggregator = aggregator
        self._organizers = tuple(organizers)
        self._directory = OrganizerDirectory.from_organizers(self._organizers)
        self._events: List[Event] = []
        self._locations: List[str] = []
        self._error: Optional[str] = None
        self._loading = False
        self._loaded_at: Optional[datetime] = None
        self._generation = 0

    @property
    def organizers(self) -> Sequence[Organizer]:
        return self._organizers

    @property
    def directory(self) -> OrganizerDirectory:
        return self._directory

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    @property
    def locations(self) -> List[str]:
        return list(self._locations)

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at

    @property
    def no_organizations(self) -> bool:
        return not self._organizers

    async def load(self) -> None:
        if not self._organizers:
            self._loading = False
            return

        self._generation += 1
        generation = self._generation
        self._loading = True

        try:
            organizer_ids = [organizer.id for organizer in self._organizers]
            events = await self._aggregator.fetch_all_events(organizer_ids)
        except Exception as exc:
            if generation != self._generation:
                logger.debug("Discarding failure from superseded load %d", generation)
                return
            logger.error("Failed to load events: %s", exc)
            self._error = str(exc) or "Failed to load events"
        else:
            if generation != self._generation:
                logger.debug("Discarding result from superseded load %d", generation)
                return
            self._events = events
            self._locations = derive_locations(events)
            self._error = None
            self._loaded_at = datetime.now(timezone.utc)
        self._loading = False

    async def retry(self) -> None:
        self._error = None
        await self.load()

    def snapshot(self, filters: Optional[EventFilters] = None) -> FeedSnapshot:
        """Apply filters; unset organizations and locations default to all known values."""
        filters = filters or EventFilters()
        if filters.organizations is None:
            filters = replace(filters, organizations=frozenset(self._directory.names))
        if filters.locations is None:
            filters = replace(filters, locations=frozenset(self._locations))
        return FeedSnapshot(
            events=apply_filters(self._events, filters),
            counts=count_event_types(self._events, filters),
            locations=list(self._locations),
            directory=self._directory,
            error=self._error,
            loading=self._loading,
            no_organizations=self.no_organizations,
            loaded_at=self._loaded_at,
        )
