from datetime import datetime, timezone


def utc_now() -> datetime:
    """Hora actual en UTC, tz-aware."""
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Lleva un datetime a UTC tz-aware; los naive se asumen UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
