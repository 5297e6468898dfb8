"""
Time utilities.

All timestamps in the system are timezone-aware UTC. ``utcnow()`` is the
single clock used for ``Profile.last_updated``; tests pin it by passing an
explicit ``now`` to the evaluator instead.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def to_utc_iso(value: Optional[datetime]) -> Optional[str]:
    """Render ``value`` as an ISO-8601 UTC string with a ``Z`` suffix.

    Naive datetimes are assumed to already be UTC. ``None`` passes through.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def run_date_label(run_date: Optional[date] = None) -> str:
    """Return the ``YYYY-MM-DD`` label used in report filenames."""
    return (run_date or utcnow().date()).isoformat()
