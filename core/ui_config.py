"""
core/ui_config.py
-----------------
Central configuration hub for the backend, the provisioner and the Streamlit UI.

- Reads backend & Supabase settings from environment variables (and `.env`).
- Unset or blank Supabase values fall back to the placeholder sentinels, so a
  fresh checkout starts in "not configured" mode instead of crashing.
"""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Placeholder sentinels (what a fresh checkout ships with)
# ---------------------------------------------------------------------------

SENTINEL_URL = "YOUR_SUPABASE_URL"
SENTINEL_KEY = "YOUR_SUPABASE_ANON_KEY"

# ---------------------------------------------------------------------------
# Backend / UI configuration
# ---------------------------------------------------------------------------

BACKEND_URL: str = os.getenv("BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")
CACHE_TTL: int = int(os.getenv("BACKEND_STATUS_TTL", "60"))  # seconds
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def _env_or(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def load_supabase_settings() -> Tuple[str, str]:
    """
    Read the Supabase endpoint and anon key from the environment.

    Returns
    -------
    tuple[str, str]
        (url, anon_key). Missing values come back as the sentinels.
    """
    url = _env_or("SUPABASE_URL", SENTINEL_URL)
    key = _env_or("SUPABASE_ANON_KEY", SENTINEL_KEY)
    return url, key
