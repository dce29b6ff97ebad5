#!/usr/bin/env python3
"""
Application settings and configuration helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import logging
import os
from typing import List, Optional, Tuple

from ..data.organizations import parse_organizers
from ..services.events.eventbrite import DEFAULT_API_BASE, DEFAULT_WINDOW_MONTHS
from ..services.events.models import Organizer
from ..services.events.transport import DEFAULT_TIMEOUT_SECONDS, parse_connectivity_address

logger = logging.getLogger(__name__)

_DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    """Container for runtime configuration."""

    eventbrite_token: str = field(default_factory=lambda: os.getenv("EVENTBRITE_API_TOKEN", "").strip())
    eventbrite_api_base: str = field(
        default_factory=lambda: os.getenv("EVENTBRITE_API_BASE", DEFAULT_API_BASE).strip()
    )
    organizers: List[Organizer] = field(
        default_factory=lambda: parse_organizers(os.getenv("DEFAULT_ORGANIZERS"))
    )
    request_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("EVENT_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
    )
    window_months: int = field(
        default_factory=lambda: int(os.getenv("EVENT_WINDOW_MONTHS", str(DEFAULT_WINDOW_MONTHS)))
    )
    max_concurrency: Optional[int] = field(
        default_factory=lambda: _optional_int("EVENT_FETCH_MAX_CONCURRENCY")
    )
    connectivity_address: Optional[Tuple[str, int]] = field(
        default_factory=lambda: parse_connectivity_address(os.getenv("CONNECTIVITY_CHECK_ADDRESS", ""))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").strip().upper())
    domain_name: str = field(default_factory=lambda: os.getenv("DOMAIN_NAME", "").strip())
    _dev_origins: List[str] = field(default_factory=lambda: list(_DEV_ORIGINS))

    def __post_init__(self) -> None:
        if not self.eventbrite_token:
            logger.warning("EVENTBRITE_API_TOKEN not set. Eventbrite requests will be rejected.")

    def allowed_origins(self) -> List[str]:
        """Compute allowed CORS origins."""
        if self.domain_name and self.domain_name not in {"your-domain.com", "localhost"}:
            return [
                f"http://{self.domain_name}",
                f"https://{self.domain_name}",
                f"https://www.{self.domain_name}",
            ]
        return list(self._dev_origins)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
