#!/usr/bin/env python3
"""
Concurrent aggregation of events across organizers.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .errors import EventbriteApiError
from .models import Event, sort_by_start
from .provider_base import OrganizerEventSource

logger = logging.getLogger(__name__)


class EventAggregator:
    """Fans out one fetch per organizer and merges the results by start time."""

    def __init__(self, source: OrganizerEventSource, *, max_concurrency: Optional[int] = None):
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be a positive integer")
        self._source = source
        self._max_concurrency = max_concurrency

    @property
    def source(self) -> OrganizerEventSource:
        return self._source

    @property
    def max_concurrency(self) -> Optional[int]:
        return self._max_concurrency

    async def fetch_all_events(self, organizer_ids: Sequence[str]) -> List[Event]:
        ids = list(organizer_ids)
        if not ids:
            logger.info("No organizations configured; nothing to fetch.")
            return []

        # One worker per organizer unless capped; the loop's default pool is bounded.
        workers = min(self._max_concurrency or len(ids), len(ids))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="organizer-fetch")
        try:
            results = await asyncio.gather(
                *(self._fetch_isolated(organizer_id, executor) for organizer_id in ids)
            )
        finally:
            executor.shutdown(wait=False)

        merged: List[Event] = []
        for events in results:
            merged.extend(events)

        logger.info("Fetched %d events from %d organizers", len(merged), len(ids))
        return sort_by_start(merged)

    async def _fetch_isolated(self, organizer_id: str, executor: ThreadPoolExecutor) -> List[Event]:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(executor, self._source.fetch_organizer_events, organizer_id)
        except EventbriteApiError as exc:
            logger.error(
                "Error fetching events for organizer %s: %s (details: %s)",
                organizer_id,
                exc.message,
                exc.details,
            )
        except Exception as exc:
            logger.error(
                "Error fetching events for organizer %s: Unknown error (details: %s)",
                organizer_id,
                exc,
            )
        return []
