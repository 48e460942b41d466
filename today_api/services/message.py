"""Compose the friendly summary message for a day's events."""
from datetime import date
from typing import List, Sequence
from today_api.models.event import EventCategory, SpecialEvent
from today_api.utils.dates import format_long_date

OBSERVANCE_CATEGORIES = (EventCategory.OBSERVANCE, EventCategory.INTERNATIONAL_DAY)


def compose_message(day: date, events: Sequence[SpecialEvent]) -> str:
    """
    Build a summary sentence for a date.

    Events are grouped by category regardless of where they came from:
    holidays, then observances and international days, then historical
    facts. Each group contributes one fragment when non-empty.

    Args:
        day: The civil date being described
        events: Events for that date, in display order

    Returns:
        Summary message
    """
    if not events:
        return (
            f"Today is {format_long_date(day)}. While there are no widely recognized holidays or observances, "
            "every day is an opportunity to make something special happen!"
        )

    holidays = [e.name for e in events if e.category == EventCategory.PUBLIC_HOLIDAY]
    observances = [e.name for e in events if e.category in OBSERVANCE_CATEGORIES]
    facts = [e.name for e in events if e.category == EventCategory.HISTORICAL_FACT]

    parts: List[str] = []

    if holidays:
        parts.append(f"Today is {' and '.join(holidays)}!")

    if observances:
        names = ", ".join(observances)
        parts.append(f"It's also {names}." if holidays else f"Today marks {names}.")

    if facts:
        notes = " Also, ".join(f"on this day: {name}" for name in facts)
        parts.append(f"Historical note - {notes}.")

    return " ".join(parts)
