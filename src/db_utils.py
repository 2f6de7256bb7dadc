"""
Shared database utilities.
Single source of truth for PostgreSQL connection-string resolution and
row fetching.
"""

from __future__ import annotations

import os
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

import psycopg2
from psycopg2.extras import RealDictCursor


def get_conn_str() -> str:
    """Return PostgreSQL connection string.

    Checks POSTGRES_CONNECTION_STRING first, falls back to DATABASE_URL
    (Heroku standard).  Normalises postgres:// to postgresql:// for psycopg2.
    """
    url = os.getenv("POSTGRES_CONNECTION_STRING") or os.getenv("DATABASE_URL") or ""
    url = url.strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _to_plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


def fetch_all(conn_str: str, query: str, params: Optional[tuple] = None) -> List[Dict[str, Any]]:
    """Run *query* and return rows as plain dicts (Decimals become floats)."""
    if not conn_str:
        raise RuntimeError("POSTGRES_CONNECTION_STRING is not set")
    conn = psycopg2.connect(conn_str)
    try:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, params or ())
            return [{k: _to_plain(v) for k, v in dict(row).items()} for row in cur.fetchall()]
    finally:
        conn.close()


def as_date(value: Any) -> Optional[date]:
    """Coerce a DB/JSON date-ish value (date, datetime, ISO string) to a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if len(s) < 10:
        return None
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        return None
