#!/usr/bin/env python3
"""
Tests for the event listing HTTP endpoints.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.eventhub.api import api_router
from backend.eventhub.api.routers import events as events_router
from backend.eventhub.services.events.feed import EventFeed
from backend.eventhub.services.events.models import Organizer
from backend.tests.factories import make_event

ROSTER = [Organizer(id="org-a", name="Mashup Lab"), Organizer(id="org-b", name="Volta")]


class FakeAggregator:
    def __init__(self, events):
        self.events = events
        self.calls = 0

    async def fetch_all_events(self, organizer_ids):
        self.calls += 1
        return list(self.events)


@pytest.fixture
def aggregator():
    return FakeAggregator([
        make_event("demo", "2024-09-01T10:00:00Z", organizer_id="org-a", title="Mashup Lab Demo Day", city="Halifax"),
        make_event("webinar", "2024-09-02T10:00:00Z", organizer_id="org-b", title="Grant Webinar", online=True),
        make_event("mixer", "2024-09-02T18:00:00Z", organizer_id="org-b", title="Mixer", city="Moncton"),
    ])


@pytest.fixture
def client(aggregator):
    feed = EventFeed(aggregator, ROSTER)
    app = FastAPI()
    app.include_router(api_router)
    app.dependency_overrides[events_router.get_feed] = lambda: feed
    return TestClient(app)


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_organizations(client) -> None:
    response = client.get("/api/organizations")
    assert response.json() == [{"id": "org-a", "name": "Mashup Lab"}, {"id": "org-b", "name": "Volta"}]


def test_first_request_loads_events(client, aggregator) -> None:
    body = client.get("/api/events").json()

    assert aggregator.calls == 1
    assert [event["id"] for event in body["events"]] == ["demo", "webinar", "mixer"]
    assert body["locations"] == ["Halifax", "Moncton"]
    assert body["counts"] == {"virtual": 1, "in_person": 2}
    assert body["events"][0]["organizer_name"] == "Mashup Lab"

    client.get("/api/events")
    assert aggregator.calls == 1


def test_filters_from_query_string(client) -> None:
    body = client.get(
        "/api/events",
        params={"organizations": ["org-b"], "types": ["in-person"], "locations": ["Moncton"]},
    ).json()

    assert [event["id"] for event in body["events"]] == ["mixer"]
    assert body["counts"] == {"virtual": 1, "in_person": 1}


def test_search_query(client) -> None:
    body = client.get("/api/events", params={"search": "LAB"}).json()
    assert [event["id"] for event in body["events"]] == ["demo"]


def test_calendar_view_groups_by_day(client) -> None:
    body = client.get("/api/events", params={"view": "calendar"}).json()
    assert body["calendar"] == {"2024-09-01": ["demo"], "2024-09-02": ["webinar", "mixer"]}


def test_unknown_event_type_is_rejected(client) -> None:
    response = client.get("/api/events", params={"types": ["hybrid"]})
    assert response.status_code == 422


def test_reload_refetches(client, aggregator) -> None:
    client.get("/api/events")
    response = client.post("/api/events/reload")

    assert response.status_code == 200
    assert aggregator.calls == 2
    assert response.json()["total_events"] == 3
