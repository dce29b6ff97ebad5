#!/usr/bin/env python3
"""
Event listing endpoints backing the list and calendar views.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.container import ServiceContainer, get_service_container
from ...services.events.feed import EventFeed
from ...services.events.filters import EVENT_TYPES, EventFilters
from ..schemas import EventListResponse, OrganizerOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Events"])


def get_container() -> ServiceContainer:
    return get_service_container()


def get_feed(container: ServiceContainer = Depends(get_container)) -> EventFeed:
    return container.event_feed


def _as_set(values: Optional[List[str]]) -> Optional[frozenset]:
    if values is None:
        return None
    return frozenset(value for value in values if value)


@router.get("/organizations", response_model=List[OrganizerOut])
async def list_organizations(feed: EventFeed = Depends(get_feed)) -> List[OrganizerOut]:
    """List the configured organizer roster."""
    return [OrganizerOut(id=organizer.id, name=organizer.name) for organizer in feed.organizers]


@router.get("/events", response_model=EventListResponse)
async def list_events(
    organizations: Optional[List[str]] = Query(default=None, description="Organizer ids to include"),
    types: Optional[List[str]] = Query(default=None, description="'virtual' and/or 'in-person'"),
    locations: Optional[List[str]] = Query(default=None, description="Cities to include for in-person events"),
    search: str = Query(default="", description="Case-insensitive text search"),
    view: Literal["list", "calendar"] = "list",
    feed: EventFeed = Depends(get_feed),
) -> EventListResponse:
    """
    Return the filtered event collection with facets and type counts.

    The first request triggers the initial load.
    """
    event_types = _as_set(types)
    if event_types is not None and not event_types <= EVENT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown event type(s): {sorted(event_types - EVENT_TYPES)}",
        )

    if feed.loaded_at is None and not feed.loading and feed.error is None:
        await feed.load()

    filters = EventFilters(
        organizations=_as_set(organizations),
        event_types=event_types if event_types is not None else EVENT_TYPES,
        locations=_as_set(locations),
        search=search.strip(),
    )

    try:
        snapshot = feed.snapshot(filters)
        return EventListResponse.from_snapshot(snapshot, calendar=view == "calendar")
    except Exception as exc:
        logger.error("Event listing failed: %s", exc, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Event listing failed: {exc}",
        )


@router.post("/events/reload", response_model=EventListResponse)
async def reload_events(feed: EventFeed = Depends(get_feed)) -> EventListResponse:
    """Re-run the full aggregation from scratch."""
    logger.info("Manual reload requested for %d organizers", len(feed.organizers))
    await feed.retry()
    return EventListResponse.from_snapshot(feed.snapshot())
