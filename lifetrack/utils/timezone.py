from datetime import datetime, date, timezone as dt_timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from lifetrack.core.config import settings


def get_zoneinfo() -> Optional[ZoneInfo]:
    tz_name = getattr(settings, "DEFAULT_TIMEZONE", None)
    if not tz_name:
        return None
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def now_local() -> datetime:
    tz = get_zoneinfo()
    return datetime.now(tz) if tz else datetime.now(dt_timezone.utc)


def today_local() -> date:
    return now_local().date()


def utcnow_naive() -> datetime:
    """UTC timestamp without tzinfo, used for created_at/updated_at columns."""
    return datetime.now(dt_timezone.utc).replace(tzinfo=None)


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize any datetime to UTC-naive (tzinfo=None) for consistent storage/comparison.
    - Aware datetimes are converted to UTC and tzinfo is stripped
    - Naive datetimes are returned as-is (assumed UTC)
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(dt_timezone.utc).replace(tzinfo=None)
