#!/usr/bin/env python3
"""
Logging utilities for the events backend.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    level:
        Numeric level or level name such as ``"DEBUG"``. Defaults to INFO.
    """
    if level is None:
        level = logging.INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    else:
        root.setLevel(level)

    # Connection-pool chatter drowns out per-organizer diagnostics.
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
