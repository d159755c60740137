"""Time utilities (UTC storage, calendar-date normalization)."""

from datetime import date, datetime, timezone


def now_utc_naive() -> datetime:
    """
    Current time in UTC, returned as naive datetime for DB storage.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_iso_db(dt: datetime) -> str:
    """
    Convert a DB timestamp to an ISO string with offset.

    DB timestamps in this app are stored as naive UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def to_calendar_date(value) -> date:
    """
    Reduce a date-like value to a pure calendar date.

    Aware datetimes are shifted to UTC before the time is dropped; naive
    datetimes are truncated as-is. Strings are parsed as ISO dates or
    datetimes (a trailing ``Z`` is accepted).

    Raises:
        ValueError: if the value cannot be read as a date
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty date string")
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return date.fromisoformat(text)
        except ValueError:
            return to_calendar_date(datetime.fromisoformat(text))

    raise ValueError(f"unsupported date value: {value!r}")
