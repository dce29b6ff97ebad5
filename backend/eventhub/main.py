#!/usr/bin/env python3
"""ASGI entrypoint: ``uvicorn backend.eventhub.main:app``."""

from __future__ import annotations

from .core.app import create_app

app = create_app()
