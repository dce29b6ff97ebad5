#!/usr/bin/env python3
"""
Eventbrite organizer event source.
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .errors import EventbriteApiError, InvalidArgumentError, NotFoundError
from .models import Event, sort_by_start
from .provider_base import OrganizerEventSource
from .transport import EventbriteTransport

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://www.eventbriteapi.com/v3"
DEFAULT_WINDOW_MONTHS = 6


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's length."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def format_timestamp(moment: datetime) -> str:
    """Whole-second UTC timestamp such as ``2024-05-01T13:00:00Z``."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventbriteOrganizerClient(OrganizerEventSource):
    """Fetches live, listed events for one organizer from the Eventbrite v3 API."""

    name = "eventbrite"

    def __init__(
        self,
        transport: EventbriteTransport,
        *,
        api_base: str = DEFAULT_API_BASE,
        window_months: int = DEFAULT_WINDOW_MONTHS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._transport = transport
        self._api_base = api_base.rstrip("/")
        self._window_months = window_months
        self._clock = clock

    def date_window(self) -> Tuple[str, str]:
        now = self._clock()
        return format_timestamp(now), format_timestamp(add_months(now, self._window_months))

    def query_params(self) -> Dict[str, str]:
        range_start, range_end = self.date_window()
        return {
            "status": "live",
            "order_by": "start_asc",
            "start_date.range_start": range_start,
            "start_date.range_end": range_end,
            "expand": "venue,organizer",
        }

    def organization_url(self, organizer_id: str) -> str:
        return f"{self._api_base}/organizations/{organizer_id}/events/"

    def organizer_url(self, organizer_id: str) -> str:
        return f"{self._api_base}/organizers/{organizer_id}/events/"

    def fetch_organizer_events(self, organizer_id: str) -> List[Event]:
        if not organizer_id or not organizer_id.strip():
            raise InvalidArgumentError("Organizer ID is required")

        try:
            raw_events = self._fetch_raw_events(organizer_id)
        except EventbriteApiError as exc:
            logger.error(
                "Error fetching events for organizer %s: %s (details: %s)",
                organizer_id,
                exc.message,
                exc.details,
            )
            raise
        except Exception as exc:
            logger.error(
                "Error fetching events for organizer %s: Unknown error (details: %s)",
                organizer_id,
                exc,
            )
            raise

        events = [event for event in self._parse_events(organizer_id, raw_events) if event.is_visible]
        return sort_by_start(events)

    def _fetch_raw_events(self, organizer_id: str) -> List[Dict[str, Any]]:
        params = self.query_params()
        try:
            payload = self._transport.request(self.organization_url(organizer_id), params)
        except NotFoundError:
            logger.info(
                "Organization endpoint returned 404 for %s. Retrying organizer endpoint.",
                organizer_id,
            )
            payload = self._transport.request(self.organizer_url(organizer_id), params)
        return list((payload or {}).get("events") or [])

    def _parse_events(self, organizer_id: str, raw_events: List[Dict[str, Any]]) -> List[Event]:
        events: List[Event] = []
        for raw in raw_events:
            try:
                events.append(Event.model_validate(raw))
            except ValidationError as exc:
                event_id: Optional[Any] = raw.get("id") if isinstance(raw, dict) else None
                logger.warning(
                    "Skipping malformed event %s for organizer %s (%d validation errors)",
                    event_id,
                    organizer_id,
                    exc.error_count(),
                )
        return events
