#!/usr/bin/env python3
"""Helpers for building Eventbrite payloads and events in tests."""

from __future__ import annotations

from typing import Any, Dict, Optional

from backend.eventhub.services.events.models import Event


def raw_event(
    event_id: str,
    start: str,
    *,
    title: str = "Untitled",
    description: str = "",
    organizer_id: str = "org-a",
    online: bool = False,
    city: Optional[str] = "Halifax",
    venue_name: Optional[str] = "Venue",
    status: str = "live",
    listed: Optional[bool] = True,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": event_id,
        "name": {"text": title, "html": f"<p>{title}</p>"},
        "description": {"text": description},
        "start": {"utc": start, "timezone": "America/Halifax"},
        "online_event": online,
        "status": status,
        "organizer_id": organizer_id,
    }
    if listed is not None:
        payload["listed"] = listed
    if not online and (city is not None or venue_name is not None):
        payload["venue"] = {"name": venue_name, "address": {"city": city}}
    return payload


def make_event(event_id: str, start: str, **kwargs: Any) -> Event:
    return Event.model_validate(raw_event(event_id, start, **kwargs))
