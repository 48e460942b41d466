"""Floating holidays: dates defined by a weekday rule within a month."""
import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple

from today_api.models.event import EventCategory, SpecialEvent

# Sentinel occurrence meaning "the last such weekday of the month"
LAST = -1


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the Nth occurrence of a weekday in a month.

    Weekdays use Python numbering (Monday=0 ... Sunday=6). The result is
    not clamped to the month: asking for a 5th occurrence that does not
    exist rolls into the following month.

    Args:
        year: Calendar year
        month: Month (1-12)
        weekday: Target weekday
        n: Occurrence, 1 for the first

    Returns:
        Date of the Nth occurrence
    """
    if n < 1:
        raise ValueError(f"Occurrence must be >= 1, got {n}")
    first_of_month = date(year, month, 1)
    offset = (weekday - first_of_month.weekday() + 7) % 7
    first_occurrence = first_of_month + timedelta(days=offset)
    return first_occurrence + timedelta(days=7 * (n - 1))


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Get the last occurrence of a weekday in a month (e.g. Memorial Day)."""
    last_of_month = date(year, month, calendar.monthrange(year, month)[1])
    days_back = (last_of_month.weekday() - weekday + 7) % 7
    return last_of_month - timedelta(days=days_back)


@dataclass(frozen=True)
class FloatingRule:
    """An event whose date is the Nth (or last) given weekday of a month."""

    name: str
    category: EventCategory
    month: int
    weekday: int
    occurrence: int
    description: Optional[str] = None
    region: Optional[str] = None

    def date_for_year(self, year: int) -> date:
        if self.occurrence == LAST:
            return last_weekday_of_month(year, self.month, self.weekday)
        return nth_weekday_of_month(year, self.month, self.weekday, self.occurrence)

    def to_event(self) -> SpecialEvent:
        return SpecialEvent(
            name=self.name,
            category=self.category,
            description=self.description,
            region=self.region,
        )


FLOATING_RULES: Tuple[FloatingRule, ...] = (
    FloatingRule(
        name="Martin Luther King Jr. Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=1,
        weekday=calendar.MONDAY,
        occurrence=3,
        description="Federal holiday honoring Dr. Martin Luther King Jr.",
        region="US",
    ),
    FloatingRule(
        name="Presidents' Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=2,
        weekday=calendar.MONDAY,
        occurrence=3,
        description="Federal holiday honoring US presidents",
        region="US",
    ),
    FloatingRule(
        name="Memorial Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=5,
        weekday=calendar.MONDAY,
        occurrence=LAST,
        description="Federal holiday honoring those who died in military service",
        region="US",
    ),
    FloatingRule(
        name="Labor Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=9,
        weekday=calendar.MONDAY,
        occurrence=1,
        description="Federal holiday honoring the American labor movement",
        region="US",
    ),
    FloatingRule(
        name="Columbus Day / Indigenous Peoples' Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=10,
        weekday=calendar.MONDAY,
        occurrence=2,
        description="Federal holiday (observed differently across states)",
        region="US",
    ),
    FloatingRule(
        name="Thanksgiving Day",
        category=EventCategory.PUBLIC_HOLIDAY,
        month=11,
        weekday=calendar.THURSDAY,
        occurrence=4,
        description="Federal holiday for giving thanks",
        region="US",
    ),
    FloatingRule(
        name="Mother's Day",
        category=EventCategory.OBSERVANCE,
        month=5,
        weekday=calendar.SUNDAY,
        occurrence=2,
        description="Day honoring mothers and motherhood",
        region="US",
    ),
    FloatingRule(
        name="Father's Day",
        category=EventCategory.OBSERVANCE,
        month=6,
        weekday=calendar.SUNDAY,
        occurrence=3,
        description="Day honoring fathers and fatherhood",
        region="US",
    ),
)


def floating_events_for_date(
    target: date,
    rules: Tuple[FloatingRule, ...] = FLOATING_RULES,
) -> List[SpecialEvent]:
    """Return the events of every rule that falls on ``target``, in rule order."""
    return [rule.to_event() for rule in rules if rule.date_for_year(target.year) == target]
