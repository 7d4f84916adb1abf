# supabase_client/helpers.py
"""
Utility layer for interacting with Supabase.

Features
--------
- Safe, reusable wrappers for inserting and fetching records.
- Short-circuits when only the placeholder client exists, so nothing is sent
  to the fallback host.
- Automatic timestamp fallback (for tables without default `created_at`).
- Optional verbose debug logging for diagnostics.

Used by the backend record endpoints and the UI overview.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Optional

from supabase_client.config import (
    SupabaseNotConfiguredError,
    get_provision,
    require_supabase_client,
)

logger = logging.getLogger(__name__)

# Tables used by the business application.
KNOWN_TABLES = frozenset({
    "appointments",
    "customers",
    "expenses",
    "invoice_items",
    "invoices",
    "logos",
    "notifications",
    "organizations",
    "products",
    "profiles",
    "quote_items",
    "quotes",
    "role_permissions",
    "tasks",
    "user_invitations",
    "visit_expenses",
    "visit_products",
    "visits",
})


class UnknownTableError(ValueError):
    """Raised for table names outside KNOWN_TABLES."""


def check_table(table: str) -> str:
    if table not in KNOWN_TABLES:
        raise UnknownTableError(f"Unknown table '{table}'")
    return table


def insert_record(
    table: str,
    data: Dict[str, Any],
    debug: bool = False,
) -> Dict[str, Any]:
    """
    Insert a record into a Supabase table.

    Parameters
    ----------
    table : str
        Target table name (must be in KNOWN_TABLES).
    data : dict
        Dictionary of column names and values.
    debug : bool
        If True, logs payload keys and the response.

    Returns
    -------
    dict
        Inserted record data or empty dict on failure.

    Raises
    ------
    UnknownTableError
        For a table outside KNOWN_TABLES.
    SupabaseNotConfiguredError
        When only placeholder credentials are available.
    """
    check_table(table)
    supabase = require_supabase_client(f"insert into '{table}'")

    row = dict(data)
    if "created_at" not in row:
        row["created_at"] = dt.datetime.now(dt.timezone.utc).isoformat()

    if debug:
        logger.info("[Supabase] → Inserting into '%s' (keys: %s)", table, list(row.keys()))

    try:
        res = supabase.table(table).insert(row).execute()
    except Exception as e:
        logger.warning("[Supabase] Insert into '%s' failed: %s: %s", table, type(e).__name__, e)
        return {}

    records = res.data or []
    if debug:
        logger.info("[Supabase] ✅ Insert success → %s", records)

    if isinstance(records, list):
        return records[0] if records else {}
    return records


def fetch_recent(
    table: str,
    limit: int = 10,
    debug: bool = False,
    raise_errors: bool = False,
) -> List[Dict[str, Any]]:
    """
    Fetch recent records from a Supabase table, newest first.

    Parameters
    ----------
    raise_errors : bool
        If True, query failures propagate instead of returning [], so callers
        can tell "failed" apart from "empty".

    Returns
    -------
    list[dict]
        Records from Supabase or [] on error.
    """
    check_table(table)
    supabase = require_supabase_client(f"read '{table}'")

    if debug:
        logger.info("[Supabase] → Fetching latest %d from '%s'", limit, table)

    try:
        res = (
            supabase.table(table)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
    except Exception as e:
        logger.warning("[Supabase] Fetch from '%s' failed: %s", table, e)
        if raise_errors:
            raise
        return []

    records = res.data or []
    if debug:
        logger.info("[Supabase] ← Got %d records", len(records))
    return records


def test_connection(debug: bool = False) -> Optional[str]:
    """
    Report the configured Supabase project URL.

    No request is sent; this only confirms that real credentials were
    provisioned.

    Returns
    -------
    Optional[str]
        Project URL when configured, None otherwise.
    """
    prov = get_provision()
    if not prov.configured:
        if debug:
            logger.info("[Supabase] ❌ Not configured (placeholder credentials)")
        return None
    if debug:
        logger.info("[Supabase] ✅ Client ready → %s", prov.credentials.url)
    return prov.credentials.url


__all__ = [
    "KNOWN_TABLES",
    "SupabaseNotConfiguredError",
    "UnknownTableError",
    "check_table",
    "fetch_recent",
    "insert_record",
    "test_connection",
]
