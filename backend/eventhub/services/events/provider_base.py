#!/usr/bin/env python3
"""
Event source base definitions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .models import Event


class OrganizerEventSource(ABC):
    """Abstract source of events for a single organizer account."""

    name: str

    @abstractmethod
    def fetch_organizer_events(self, organizer_id: str) -> List[Event]:
        """Fetch visible upcoming events for one organizer, sorted by start."""
