# core/supabase_helpers.py

from datetime import datetime, timezone
from typing import Optional

from core.errors import GatewayError, supabase_error
from core.supabase_client import get_supabase_client


# =================================================================
#  SAFE SELECT / INSERT / UPDATE
# =================================================================
# Every table read/write in the service goes through these helpers.
# Filters are equality predicates ANDed together. Any client failure
# surfaces as GatewayError with the backend message unchanged.
# =================================================================

def _client():
    client = get_supabase_client()
    if client is None:
        raise GatewayError("Supabase client not configured")
    return client


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def safe_select(
    table: str,
    filters: dict = None,
    *,
    columns: str = "*",
    order: Optional[str] = None,
    desc: bool = False,
    single: bool = False,
):
    """
    Table SELECT.

    `columns` accepts PostgREST embedding, e.g. "*, rooms(*)".
    With single=True returns the first matching row or None.
    """
    client = _client()

    try:
        query = client.table(table).select(columns)
        if filters:
            for key, val in filters.items():
                query = query.eq(key, val)
        if order:
            query = query.order(order, desc=desc)
        if single:
            query = query.limit(1)

        result = query.execute()
    except Exception as e:
        supabase_error(e, f"Failed to fetch from {table}")

    rows = result.data or []
    if single:
        return rows[0] if rows else None
    return rows


def safe_insert(table: str, data: dict) -> dict:
    """INSERT one row and return its stored representation."""
    client = _client()

    try:
        result = (
            client.table(table)
            .insert(data, returning="representation")
            .execute()
        )
    except Exception as e:
        supabase_error(e, f"Failed to insert into {table}")

    if not result.data:
        raise GatewayError(f"Insert into {table} returned no data")
    return result.data[0]


def safe_update(table: str, filters: dict, data: dict) -> Optional[dict]:
    """
    Conditional UPDATE.

    Only rows matching every filter are written, so
    safe_update("rooms", {"id": rid, "is_occupied": False}, {...})
    is a single compare-and-set on the backend. Returns the first
    updated row, or None when nothing matched.
    """
    if not filters:
        raise ValueError("safe_update requires at least one filter")

    client = _client()

    try:
        query = client.table(table).update(data, returning="representation")
        for key, val in filters.items():
            query = query.eq(key, val)

        result = query.execute()
    except Exception as e:
        supabase_error(e, f"Failed to update {table}")

    return result.data[0] if result.data else None
