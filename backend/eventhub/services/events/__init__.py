#!/usr/bin/env python3
"""
Event sourcing services.
"""

from __future__ import annotations

from .aggregator import EventAggregator
from .errors import ErrorKind, EventbriteApiError
from .eventbrite import EventbriteOrganizerClient
from .feed import EventFeed, FeedSnapshot
from .filters import EventFilters, OrganizerDirectory
from .models import Event, Organizer
from .provider_base import OrganizerEventSource
from .transport import EventbriteTransport

__all__ = [
    "ErrorKind",
    "Event",
    "EventAggregator",
    "EventFeed",
    "EventFilters",
    "EventbriteApiError",
    "EventbriteOrganizerClient",
    "EventbriteTransport",
    "FeedSnapshot",
    "Organizer",
    "OrganizerDirectory",
    "OrganizerEventSource",
]
