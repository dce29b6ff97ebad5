#!/usr/bin/env python3
"""
Tests for event feed load/retry behaviour.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

import pytest

from backend.eventhub.services.events.feed import EventFeed
from backend.eventhub.services.events.filters import EventFilters
from backend.eventhub.services.events.models import Event, Organizer
from backend.tests.factories import make_event

ROSTER = [Organizer(id="org-a", name="Mashup Lab"), Organizer(id="org-b", name="Volta")]


class FakeAggregator:
    def __init__(self, results: Sequence[object]):
        self.results = list(results)
        self.calls: List[List[str]] = []
        self.gates: List[Optional[asyncio.Event]] = []

    async def fetch_all_events(self, organizer_ids):
        self.calls.append(list(organizer_ids))
        outcome = self.results.pop(0)
        gate = self.gates.pop(0) if self.gates else None
        if gate is not None:
            await gate.wait()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.mark.asyncio
async def test_load_replaces_events_and_derives_locations() -> None:
    events = [
        make_event("1", "2024-09-01T10:00:00Z", organizer_id="org-a", city="Halifax"),
        make_event("2", "2024-09-02T10:00:00Z", organizer_id="org-b", online=True),
    ]
    aggregator = FakeAggregator([events])
    feed = EventFeed(aggregator, ROSTER)

    await feed.load()

    assert aggregator.calls == [["org-a", "org-b"]]
    assert [event.id for event in feed.events] == ["1", "2"]
    assert feed.locations == ["Halifax"]
    assert feed.error is None
    assert feed.loading is False
    assert feed.loaded_at is not None


@pytest.mark.asyncio
async def test_empty_roster_is_not_an_error() -> None:
    aggregator = FakeAggregator([])
    feed = EventFeed(aggregator, [])

    await feed.load()

    assert feed.no_organizations is True
    assert feed.error is None
    assert aggregator.calls == []


@pytest.mark.asyncio
async def test_top_level_failure_sets_error_and_retry_recovers() -> None:
    events = [make_event("1", "2024-09-01T10:00:00Z")]
    aggregator = FakeAggregator([RuntimeError("Malformed roster"), events])
    feed = EventFeed(aggregator, ROSTER)

    await feed.load()
    assert feed.error == "Malformed roster"
    assert feed.events == []

    await feed.retry()
    assert feed.error is None
    assert [event.id for event in feed.events] == ["1"]
    assert len(aggregator.calls) == 2


@pytest.mark.asyncio
async def test_stale_load_does_not_overwrite_newer_result() -> None:
    stale = [make_event("stale", "2024-09-01T10:00:00Z")]
    fresh = [make_event("fresh", "2024-09-01T10:00:00Z")]
    aggregator = FakeAggregator([stale, fresh])
    slow_gate = asyncio.Event()
    aggregator.gates = [slow_gate, None]
    feed = EventFeed(aggregator, ROSTER)

    first = asyncio.create_task(feed.load())
    await asyncio.sleep(0)
    await feed.retry()
    slow_gate.set()
    await first

    assert [event.id for event in feed.events] == ["fresh"]
    assert feed.loading is False


@pytest.mark.asyncio
async def test_snapshot_defaults_to_configured_organizations() -> None:
    events = [
        make_event("known", "2024-09-01T10:00:00Z", organizer_id="org-a"),
        make_event("stray", "2024-09-02T10:00:00Z", organizer_id="org-z"),
    ]
    feed = EventFeed(FakeAggregator([events]), ROSTER)
    await feed.load()

    snapshot = feed.snapshot()

    assert [event.id for event in snapshot.events] == ["known"]
    assert snapshot.directory.name_for("org-a") == "Mashup Lab"
    assert snapshot.directory.name_for("org-z") == "Unknown Organization"


@pytest.mark.asyncio
async def test_snapshot_applies_filters_and_counts() -> None:
    events = [
        make_event("v", "2024-09-01T10:00:00Z", organizer_id="org-a", online=True),
        make_event("p", "2024-09-02T10:00:00Z", organizer_id="org-a", city="Halifax"),
    ]
    feed = EventFeed(FakeAggregator([events]), ROSTER)
    await feed.load()

    snapshot = feed.snapshot(EventFilters(event_types=frozenset({"virtual"})))

    assert [event.id for event in snapshot.events] == ["v"]
    assert snapshot.counts.virtual == 1
    assert snapshot.counts.in_person == 1


@pytest.mark.asyncio
async def test_default_snapshot_hides_in_person_events_without_a_city() -> None:
    events = [
        make_event("hfx", "2024-09-01T10:00:00Z", organizer_id="org-a", city="Halifax"),
        make_event("nocity", "2024-09-02T10:00:00Z", organizer_id="org-a", city=None, venue_name=None),
        make_event("online", "2024-09-03T10:00:00Z", organizer_id="org-a", online=True),
    ]
    feed = EventFeed(FakeAggregator([events]), ROSTER)
    await feed.load()

    snapshot = feed.snapshot()

    assert [event.id for event in snapshot.events] == ["hfx", "online"]
    assert snapshot.counts.in_person == 1
    assert snapshot.counts.virtual == 1
