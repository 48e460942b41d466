from .dates import utc_now, ensure_utc, format_long_date, format_weekday, format_utc_offset

__all__ = ["utc_now", "ensure_utc", "format_long_date", "format_weekday", "format_utc_offset"]
