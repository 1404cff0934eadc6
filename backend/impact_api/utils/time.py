from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive (SQLite drops tzinfo on the way back).
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def isoformat_utc(ts):
    """Render a timestamp as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if ts is None:
        return None
    ts = normalize_ts(ts).astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
