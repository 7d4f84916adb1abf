"""
Record Endpoints
----------------
Read and insert rows of the business tables through the shared Supabase client.

Errors
------
- 404 for tables outside KNOWN_TABLES.
- 503 while Supabase runs on placeholder credentials.
- 500 when the Supabase query itself fails.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Query

from supabase_client.helpers import (
    SupabaseNotConfiguredError,
    UnknownTableError,
    fetch_recent,
    insert_record,
)

router = APIRouter(prefix="/records", tags=["records"])


@router.get("/{table}")
def get_records(table: str, limit: int = Query(10, ge=1, le=200)):
    """Most recent rows of `table`, newest first."""
    try:
        rows = fetch_recent(table, limit=limit, raise_errors=True)
    except UnknownTableError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SupabaseNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Fetch from '{table}' failed: {e}")

    return {"status": "ok", "table": table, "count": len(rows), "records": rows}


@router.post("/{table}", status_code=201)
def create_record(table: str, payload: Dict[str, Any] = Body(...)):
    try:
        row = insert_record(table, payload)
    except UnknownTableError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SupabaseNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if not row:
        raise HTTPException(status_code=500, detail=f"Insert into '{table}' failed.")
    return {"status": "ok", "table": table, "record": row}
