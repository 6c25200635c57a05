# src/employee_api/utils/timezone.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytz

# -----------------------------------------------------------------------------
# All timestamps are persisted as naive UTC so SQLite and PostgreSQL agree.
# -----------------------------------------------------------------------------
UTC = pytz.utc


def now_utc() -> datetime:
    """
    Return the current time as a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)  # 2025-10-04 07:40:15+00:00


def utcnow_naive() -> datetime:
    """
    Return the current UTC time without tzinfo, ready to be stored.
    """
    return now_utc().replace(tzinfo=None)


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime for storage:
    - None -> None
    - naive -> assumed UTC, returned unchanged
    - aware -> converted to UTC, tzinfo dropped
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)
