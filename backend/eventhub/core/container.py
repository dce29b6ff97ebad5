#!/usr/bin/env python3
"""
Service container for shared backend dependencies.
"""

from __future__ import annotations

from functools import lru_cache

from .settings import Settings, get_settings
from ..services.events import (
    EventAggregator,
    EventbriteOrganizerClient,
    EventbriteTransport,
    EventFeed,
)


class ServiceContainer:
    """Lazily initialised service container."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._transport: EventbriteTransport | None = None
        self._organizer_client: EventbriteOrganizerClient | None = None
        self._event_aggregator: EventAggregator | None = None
        self._event_feed: EventFeed | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def transport(self) -> EventbriteTransport:
        if self._transport is None:
            self._transport = EventbriteTransport(
                self._settings.eventbrite_token,
                timeout=self._settings.request_timeout_seconds,
                connectivity_address=self._settings.connectivity_address,
            )
        return self._transport

    @property
    def organizer_client(self) -> EventbriteOrganizerClient:
        if self._organizer_client is None:
            self._organizer_client = EventbriteOrganizerClient(
                self.transport,
                api_base=self._settings.eventbrite_api_base,
                window_months=self._settings.window_months,
            )
        return self._organizer_client

    @property
    def event_aggregator(self) -> EventAggregator:
        if self._event_aggregator is None:
            self._event_aggregator = EventAggregator(
                self.organizer_client,
                max_concurrency=self._settings.max_concurrency,
            )
        return self._event_aggregator

    @property
    def event_feed(self) -> EventFeed:
        if self._event_feed is None:
            self._event_feed = EventFeed(self.event_aggregator, self._settings.organizers)
        return self._event_feed

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()


@lru_cache(maxsize=1)
def get_service_container() -> ServiceContainer:
    """Return the shared service container instance."""
    return ServiceContainer(get_settings())
