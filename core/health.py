"""
core/health.py
--------------
System health diagnostics for the ZOGU backend.

Purpose
-------
- Used by the FastAPI `/health` endpoint and the Streamlit status bar.
- Reports whether Supabase credentials are configured (no connectivity probe).
- Reports backend uptime, version and CPU/memory usage.
- Returns JSON-safe dicts ready for serialization.
"""

from __future__ import annotations

import os
import platform
import time
from typing import Any, Dict

import psutil

from core.metadata import __version__
from supabase_client.config import get_provision

# Cache the process start time for uptime calculation
START_TIME = time.time()

# Sampling window for cpu_percent; interval=None reports 0.0 on the first call
CPU_SAMPLE_SEC = 0.2

SETUP_STEPS = [
    "Create a `.env` file next to the backend (or export the variables in your shell).",
    "Set SUPABASE_URL and SUPABASE_ANON_KEY to the values shown in your Supabase "
    "Project Settings under \"API\".",
    "Restart the backend and reload the UI.",
]


def config_status() -> Dict[str, Any]:
    """
    Configuration flag plus what the UI needs to render a setup prompt.

    Returns
    -------
    dict
        {"configured": bool, "supabase_url": str, "supabase_key": str (masked),
         "setup_steps": list[str]}  -- steps are empty once configured.
    """
    prov = get_provision()
    masked = prov.credentials.masked()
    return {
        "configured": prov.configured,
        "supabase_url": masked["url"],
        "supabase_key": masked["key"],
        "setup_steps": [] if prov.configured else list(SETUP_STEPS),
    }


def system_health() -> Dict[str, Any]:
    """
    Return structured backend health diagnostics.

    Returns
    -------
    dict
        JSON-safe health report compatible with the UI HealthSchema.
    """
    cfg = config_status()

    if cfg["configured"]:
        status = "ok"
        message = "Backend operational."
    else:
        status = "unconfigured"
        message = "Supabase credentials are placeholders; data endpoints are disabled."

    # --- System metrics ---
    try:
        cpu_load = psutil.cpu_percent(interval=CPU_SAMPLE_SEC)
        memory_usage = round(psutil.virtual_memory().used / (1024 * 1024), 2)
    except (psutil.Error, OSError):
        cpu_load = None
        memory_usage = None

    return {
        "status": status,
        "message": message,
        "version": os.getenv("BACKEND_VERSION", __version__),
        "supabase_configured": cfg["configured"],
        "supabase_url": cfg["supabase_url"],
        "supabase_key": cfg["supabase_key"],
        "cpu_load": cpu_load,
        "memory_usage": memory_usage,
        "uptime_sec": round(time.time() - START_TIME, 2),
        "system": platform.system(),
        "release": platform.release(),
    }
