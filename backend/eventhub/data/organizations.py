#!/usr/bin/env python3
"""
Built-in organizer roster.
"""

from __future__ import annotations

import json
from typing import List, Optional

from ..services.events.models import Organizer

ORGANIZATIONS: List[Organizer] = [
    Organizer(id="16982059077", name="ACENET"),
    Organizer(id="1170751291", name="Boundless Accelerator"),
    Organizer(id="17798675657", name="CEED"),
    Organizer(id="17248940259", name="COVE"),
    Organizer(id="54805067693", name="Dal Innovates"),
    Organizer(id="28571197123", name="Emera ideaHUB"),
    Organizer(id="17743415525", name="IGNITE"),
    Organizer(id="30295870918", name="Invest Nova Scotia"),
    Organizer(id="18504351047", name="Mashup Lab"),
    Organizer(id="69049022273", name="Nova Scotia Health Innovation Hub"),
    Organizer(id="29691516847", name="Ocean Startup Project"),
    Organizer(id="5809505854", name="Planet Hatch"),
    Organizer(id="90150697203", name="Spinnaker Sales Group"),
    Organizer(id="70710753533", name="Springboard Atlantic"),
    Organizer(id="51349688173", name="Tribe Network"),
    Organizer(id="74023149123", name="Venn Innovation"),
    Organizer(id="3570959959", name="Volta"),
]


def parse_organizers(raw: Optional[str]) -> List[Organizer]:
    """Parse a JSON list of ``{"id", "name"}`` objects.

    A blank value yields the built-in roster. Malformed input raises
    ``ValueError``.
    """
    if raw is None or not raw.strip():
        return list(ORGANIZATIONS)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"DEFAULT_ORGANIZERS is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ValueError("DEFAULT_ORGANIZERS must be a JSON list")

    organizers: List[Organizer] = []
    for entry in data:
        if not isinstance(entry, dict) or "id" not in entry:
            raise ValueError(f"Invalid organizer entry: {entry!r}")
        organizers.append(Organizer(id=str(entry["id"]), name=str(entry.get("name", ""))))
    return organizers
