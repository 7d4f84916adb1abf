"""
ZOGU Backend API
================

FastAPI service in front of the shared Supabase client.

Design Intent
-------------
• Startup
    - Logging configured once.
    - Supabase client provisioned exactly once at import time. Placeholder
      credentials never crash startup: an inert client is built instead and
      the Configured flag is reported as false.
    - No connectivity probe runs at startup.

• Status
    - `/health`, `/status/config`, `/status/summary` tell the UI whether to
      render the configuration notice or the main application.

• Data
    - `/records/{table}` routes go through `supabase_client.helpers` and
      answer 503 until real credentials are configured.
"""

from __future__ import annotations

import logging
import os
import sys

from fastapi import FastAPI

# --------------------------------------------------------------------------- #
# Path setup: ensure project root on sys.path
# --------------------------------------------------------------------------- #

# Allows imports like `core.*`, `supabase_client.*` when running via uvicorn
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from core.health import config_status, system_health
from core.logging_config import configure_logging
from core.metadata import __version__, get_metadata
from supabase_client.config import get_provision
from backend.routes.records import router as records_router

configure_logging()
logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Supabase provisioning (once per process)
# --------------------------------------------------------------------------- #

PROVISION = get_provision()
if PROVISION.configured:
    logger.info("[Backend] ✅ Supabase configured; data endpoints enabled.")
else:
    logger.warning("[Backend] ⚠️ Supabase not configured; data endpoints will answer 503.")

# --------------------------------------------------------------------------- #
# FastAPI App
# --------------------------------------------------------------------------- #

app = FastAPI(
    title="ZOGU Backend API",
    version=__version__,
    description=(
        "Backend for the ZOGU field-service application.\n"
        "- Supabase client provisioning with placeholder detection.\n"
        "- Health and configuration status for the UI.\n"
        "- Record endpoints for the business tables."
    ),
)

app.include_router(records_router)


# --------------------------------------------------------------------------- #
# Core Routes
# --------------------------------------------------------------------------- #

@app.get("/")
async def root():
    """
    Basic liveness probe.
    """
    return {
        "status": "ok",
        "message": "ZOGU Backend is live.",
        "version": app.version,
        "supabase_configured": PROVISION.configured,
    }


@app.get("/health")
async def health():
    """
    System health endpoint.

    Delegates to core.health.system_health which:
    - Reports the Supabase Configured flag and effective URL (key masked)
    - Adds runtime info (uptime, CPU, memory)
    - Returns a stable, machine-readable payload
    """
    return system_health()


@app.get("/status/config")
async def status_config():
    """Configured flag plus setup steps when credentials are placeholders."""
    return config_status()


@app.get("/status/summary")
async def status_summary():
    """
    High-level status summary for dashboards.
    """
    return {
        **get_metadata(),
        "backend_version": app.version,
        "supabase_configured": PROVISION.configured,
        "routers": {
            "records_registered": True,
        },
    }
