from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_date(value: Any) -> Optional[date]:
    """Coerce a date-like value into a calendar date.

    Accepts ``date``/``datetime`` objects, ISO strings (``2025-01-31`` or a
    full ISO timestamp) and serialized timestamps such as
    ``{"seconds": 1735689600}``. Anything else yields ``None``.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
            return datetime.fromtimestamp(seconds, tz=timezone.utc).date()
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return parse_iso_date(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None

    return None


def to_date_key(value: Any) -> str:
    """ISO ``YYYY-MM-DD`` key for a date-like value, or ``""``."""
    d = to_date(value)
    return d.isoformat() if d else ""
