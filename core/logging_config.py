"""
core/logging_config.py
----------------------
Logging setup shared by the backend, the provisioner and CLI diagnostics.

Messages keep the `[Supabase]` / `[Backend]` tags; secrets never reach a log
line unmasked (see `mask_key`).
"""

from __future__ import annotations

import logging
from typing import Optional

from core.ui_config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    resolved = (level or LOG_LEVEL).upper()

    if _configured:
        logging.getLogger().setLevel(resolved)
        return

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    _configured = True


def mask_key(key: Optional[str]) -> str:
    """Return a log-safe rendering of an API key."""
    if not key:
        return ""
    if len(key) <= 12:
        return "***"
    return f"{key[:6]}…{key[-4:]}"
