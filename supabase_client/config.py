# supabase_client/config.py
"""
Supabase client provisioning.

Decides whether real credentials were supplied, swaps in an inert but
well-formed fallback pair when they were not, and builds the one client
handle the whole process shares.

Features
--------
- Exact-match sentinel check (no prefix or pattern matching).
- Fallback URL/key that `create_client` accepts but that reach no project.
- Construct-once, lock-guarded singleton via `get_provision()`.
- No network I/O: `create_client` only validates and wires sub-clients.

Consumers read `is_supabase_configured()` to decide whether to show the
setup notice, and `get_supabase_client()` to talk to the backend.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict
from supabase import Client, create_client

from core.logging_config import mask_key
from core.ui_config import SENTINEL_KEY, SENTINEL_URL, load_supabase_settings

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Fallback pair: parseable URL + JWT-shaped key, functionally inert
# --------------------------------------------------------------------------- #

FALLBACK_URL = "https://placeholder.supabase.co"
FALLBACK_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJpc3MiOiJzdXBhYmFzZSIsInJlZiI6InBsYWNlaG9sZGVyIiwicm9sZSI6ImFub24iLCJpYXQiOjAsImV4cCI6MH0"
    ".cGxhY2Vob2xkZXItc2lnbmF0dXJlLW5vdC12YWxpZA"
)


class SupabaseNotConfiguredError(RuntimeError):
    """Raised when a caller needs real Supabase credentials and has none."""


# --------------------------------------------------------------------------- #
# Typed records
# --------------------------------------------------------------------------- #

class SupabaseCredentials(BaseModel):
    """Effective endpoint/key pair handed to `create_client`."""
    model_config = ConfigDict(frozen=True)

    url: str
    key: str

    def masked(self) -> dict:
        return {"url": self.url, "key": mask_key(self.key)}


class SupabaseProvision(BaseModel):
    """Result of provisioning: the Configured flag and the client built from it."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    configured: bool
    credentials: SupabaseCredentials
    client: Client


# --------------------------------------------------------------------------- #
# Provisioning steps
# --------------------------------------------------------------------------- #

def is_configured(url: str, key: str) -> bool:
    """True iff neither value is its placeholder sentinel."""
    return url != SENTINEL_URL and key != SENTINEL_KEY


def resolve_credentials(url: str, key: str) -> SupabaseCredentials:
    """Pass real credentials through; otherwise return the fallback pair."""
    if is_configured(url, key):
        return SupabaseCredentials(url=url, key=key)
    return SupabaseCredentials(url=FALLBACK_URL, key=FALLBACK_KEY)


def build_client(credentials: SupabaseCredentials) -> Client:
    """Construct the SDK client. Validation errors on real input propagate."""
    return create_client(credentials.url, credentials.key)


def provision(url: str, key: str) -> SupabaseProvision:
    """
    Run the check → select → construct sequence for one endpoint/key pair.

    Parameters
    ----------
    url : str
        Supabase project URL as configured.
    key : str
        Supabase anon key as configured.

    Returns
    -------
    SupabaseProvision
        Immutable record of the outcome.
    """
    configured = is_configured(url, key)
    credentials = resolve_credentials(url, key)

    if configured:
        logger.info("[Supabase] Using project %s (key %s)", credentials.url, mask_key(credentials.key))
    else:
        logger.warning(
            "[Supabase] Credentials are placeholders; building an inert client against %s. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY to connect.",
            credentials.url,
        )

    client = build_client(credentials)
    return SupabaseProvision(configured=configured, credentials=credentials, client=client)


# --------------------------------------------------------------------------- #
# Process-wide singleton
# --------------------------------------------------------------------------- #

_provision: Optional[SupabaseProvision] = None
_provision_lock = threading.Lock()


def get_provision() -> SupabaseProvision:
    """
    Provision from the environment on first use, then return the same record.

    The first construction runs under a lock, so concurrent first callers
    share one client instead of each building their own.
    """
    global _provision
    if _provision is None:
        with _provision_lock:
            if _provision is None:
                url, key = load_supabase_settings()
                _provision = provision(url, key)
    return _provision


def get_supabase_client() -> Client:
    """Shared client handle (inert when not configured)."""
    return get_provision().client


def is_supabase_configured() -> bool:
    """Configured flag of the shared provision; False means placeholder credentials."""
    return get_provision().configured


def require_supabase_client(action: Optional[str] = None) -> Client:
    """Return the shared client, or raise if only the fallback is available."""
    prov = get_provision()
    if not prov.configured:
        what = f" to {action}" if action else ""
        raise SupabaseNotConfiguredError(
            f"Supabase is not configured{what}; set SUPABASE_URL and SUPABASE_ANON_KEY."
        )
    return prov.client
