#!/usr/bin/env python3
"""
System and diagnostics endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": "1.0.0",
        "features": ["organizer_aggregation", "event_filters", "calendar_view"],
    }
