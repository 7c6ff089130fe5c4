from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional


def format_rfc1123(value: Optional[datetime] = None) -> str:
    """Format `value` (default: now) as an RFC 1123 date, e.g. ``Sun, 18 Oct 2026 10:00:00 GMT``.

    Naive datetimes are assumed to be UTC.
    """
    if value is None:
        value = datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def format_duration(seconds: float) -> str:
    """Render a duration as ``<minutes>m <seconds>s <millis>ms``."""
    total_ms = int(round(max(seconds, 0.0) * 1000))
    minutes, rest_ms = divmod(total_ms, 60_000)
    secs, millis = divmod(rest_ms, 1000)
    return f"{minutes}m {secs}s {millis}ms"
