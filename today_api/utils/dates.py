"""Date and time formatting utilities."""
from datetime import date, datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to aware UTC.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: datetime to normalize

    Returns:
        Aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# Fixed English names; strftime's %B/%A follow the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def format_long_date(d: date) -> str:
    """Format a date as e.g. "January 5, 2024"."""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def format_weekday(d: date) -> str:
    """Full English weekday name, e.g. "Monday"."""
    return WEEKDAY_NAMES[d.weekday()]


def format_utc_offset(offset: timedelta) -> str:
    """
    Format a UTC offset for display.

    Whole hours are rendered without minutes ("UTC-5", "UTC+0"),
    fractional offsets with them ("UTC+5:30", "UTC-3:30").
    """
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"
