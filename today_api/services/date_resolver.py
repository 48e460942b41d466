"""
Resolve the current civil date in the configured timezone.

TIMEZONE HANDLING:
Identifiers are looked up in the IANA database first (zoneinfo, with the
tzdata package as a fallback source). Windows-style identifiers such as
"Eastern Standard Time" are accepted by mapping them to their IANA zone.
If neither scheme resolves, TimezoneResolutionError is raised; this is a
configuration error and must stop the application from starting.

DAYLIGHT SAVING TIME:
Conversion goes through the zone's own transition rules, so an instant
just after a spring-forward or fall-back transition gets the new offset.
Near midnight the civil date can differ from the UTC date by one day.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from today_api.exceptions import TimezoneResolutionError
from today_api.utils.dates import ensure_utc, format_utc_offset, utc_now, format_weekday

logger = logging.getLogger(__name__)

# Windows timezone id -> IANA zone (subset of the CLDR windowsZones mapping)
WINDOWS_TO_IANA = {
    "Eastern Standard Time": "America/New_York",
    "Central Standard Time": "America/Chicago",
    "Mountain Standard Time": "America/Denver",
    "US Mountain Standard Time": "America/Phoenix",
    "Pacific Standard Time": "America/Los_Angeles",
    "Alaskan Standard Time": "America/Anchorage",
    "Hawaiian Standard Time": "Pacific/Honolulu",
    "Atlantic Standard Time": "America/Halifax",
    "GMT Standard Time": "Europe/London",
    "W. Europe Standard Time": "Europe/Berlin",
    "Romance Standard Time": "Europe/Paris",
    "Central European Standard Time": "Europe/Warsaw",
    "India Standard Time": "Asia/Kolkata",
    "China Standard Time": "Asia/Shanghai",
    "Tokyo Standard Time": "Asia/Tokyo",
    "AUS Eastern Standard Time": "Australia/Sydney",
}


def _load_iana(identifier: str) -> Optional[tzinfo]:
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def resolve_timezone(identifier: str) -> tzinfo:
    """
    Look up a timezone by IANA or Windows identifier.

    Args:
        identifier: e.g. "America/New_York" or "Eastern Standard Time"

    Returns:
        tzinfo for the zone

    Raises:
        TimezoneResolutionError: If no naming scheme knows the identifier
    """
    zone = _load_iana(identifier)
    if zone is not None:
        return zone

    iana_id = WINDOWS_TO_IANA.get(identifier)
    if iana_id is not None:
        zone = _load_iana(iana_id)
        if zone is not None:
            logger.info(f"Resolved Windows timezone '{identifier}' as '{iana_id}'")
            return zone

    raise TimezoneResolutionError(identifier, ["IANA", "Windows"])


@dataclass(frozen=True)
class ResolvedDate:
    """Civil date/time in the configured timezone."""

    local_datetime: datetime
    date: date
    weekday_name: str
    is_dst: bool
    timezone_label: str


class DateResolver:
    """Converts the current instant into a civil date for one fixed timezone."""

    def __init__(self, timezone_id: str, clock: Callable[[], datetime] = utc_now):
        self.timezone_id = timezone_id
        self.clock = clock
        self.zone = resolve_timezone(timezone_id)

    def resolve(self, now: Optional[datetime] = None) -> ResolvedDate:
        """
        Resolve an instant (default: the clock's current UTC time).

        Naive instants are treated as UTC.
        """
        instant = ensure_utc(now if now is not None else self.clock())
        local = instant.astimezone(self.zone)
        is_dst = bool(local.dst())
        return ResolvedDate(
            local_datetime=local,
            date=local.date(),
            weekday_name=format_weekday(local.date()),
            is_dst=is_dst,
            timezone_label=self.label_for(local),
        )

    def label_for(self, local: datetime) -> str:
        """Display label such as "America/New_York (EDT, UTC-4)"."""
        offset = format_utc_offset(local.utcoffset() or timedelta(0))
        abbreviation = local.tzname()
        if abbreviation and not abbreviation.lstrip("+-").isdigit():
            return f"{self.timezone_id} ({abbreviation}, {offset})"
        return f"{self.timezone_id} ({offset})"
