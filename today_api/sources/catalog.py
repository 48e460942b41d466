"""
Static catalog of fixed-date events and historical facts.

Two independent tables keyed by (month, day):
- FIXED_DATE_EVENTS: holidays, observances and international days that
  fall on the same date every year
- HISTORICAL_FACTS: notable things that happened on that date

Keys are not validated against month lengths; a key such as (2, 30)
would simply never be looked up.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from today_api.models.event import EventCategory, SpecialEvent

CalendarKey = Tuple[int, int]

_HOLIDAY = EventCategory.PUBLIC_HOLIDAY
_OBSERVANCE = EventCategory.OBSERVANCE
_INTERNATIONAL = EventCategory.INTERNATIONAL_DAY
_FACT = EventCategory.HISTORICAL_FACT


def _event(name: str, category: EventCategory, description: str, region: Optional[str] = None) -> SpecialEvent:
    return SpecialEvent(name=name, category=category, description=description, region=region)


_fixed: Dict[CalendarKey, Tuple[SpecialEvent, ...]] = {
    # January
    (1, 1): (
        _event("New Year's Day", _HOLIDAY, "Federal holiday celebrating the first day of the year", "US"),
        _event("World Day of Peace", _INTERNATIONAL, "UN-recognized day promoting peace worldwide"),
    ),
    (1, 15): (
        _event(
            "Martin Luther King Jr. Day (observed)",
            _HOLIDAY,
            "Federal holiday honoring Dr. Martin Luther King Jr. (actual date varies)",
            "US",
        ),
    ),
    (1, 16): (
        _event("National Nothing Day", _OBSERVANCE, "A day to just sit without celebrating anything", "US"),
        _event("Religious Freedom Day", _OBSERVANCE, "Commemorates the Virginia Statute for Religious Freedom (1786)", "US"),
    ),
    (1, 27): (
        _event(
            "International Holocaust Remembrance Day",
            _INTERNATIONAL,
            "UN-designated day commemorating the victims of the Holocaust",
        ),
    ),
    # February
    (2, 2): (
        _event("Groundhog Day", _OBSERVANCE, "Traditional day for predicting the arrival of spring", "US"),
    ),
    (2, 14): (
        _event("Valentine's Day", _OBSERVANCE, "Day celebrating love and affection"),
    ),
    # March
    (3, 8): (
        _event("International Women's Day", _INTERNATIONAL, "UN-recognized day celebrating women's achievements"),
    ),
    (3, 14): (
        _event("Pi Day", _OBSERVANCE, "Celebration of the mathematical constant pi (3.14)"),
    ),
    (3, 17): (
        _event("St. Patrick's Day", _OBSERVANCE, "Cultural and religious celebration of Irish heritage"),
    ),
    # April
    (4, 1): (
        _event("April Fools' Day", _OBSERVANCE, "Day for playing practical jokes and hoaxes"),
    ),
    (4, 22): (
        _event("Earth Day", _INTERNATIONAL, "Annual event demonstrating support for environmental protection"),
    ),
    # May
    (5, 1): (
        _event("International Workers' Day", _INTERNATIONAL, "Celebration of laborers and the working class"),
    ),
    (5, 5): (
        _event("Cinco de Mayo", _OBSERVANCE, "Celebration of Mexican heritage and pride", "US"),
    ),
    # June
    (6, 14): (
        _event("Flag Day", _OBSERVANCE, "Commemorates the adoption of the US flag", "US"),
    ),
    (6, 19): (
        _event("Juneteenth", _HOLIDAY, "Federal holiday commemorating the end of slavery in the US", "US"),
    ),
    (6, 21): (
        _event("International Day of Yoga", _INTERNATIONAL, "UN-recognized day promoting yoga worldwide"),
    ),
    # July
    (7, 4): (
        _event("Independence Day", _HOLIDAY, "Federal holiday celebrating the Declaration of Independence", "US"),
    ),
    # August
    (8, 19): (
        _event("World Humanitarian Day", _INTERNATIONAL, "UN-designated day honoring humanitarian workers"),
    ),
    # September
    (9, 11): (
        _event("Patriot Day", _OBSERVANCE, "Day of remembrance for the September 11, 2001 attacks", "US"),
    ),
    (9, 21): (
        _event("International Day of Peace", _INTERNATIONAL, "UN-designated day devoted to peace"),
    ),
    # October
    (10, 31): (
        _event("Halloween", _OBSERVANCE, "Traditional celebration with costumes and trick-or-treating"),
    ),
    # November
    (11, 11): (
        _event("Veterans Day", _HOLIDAY, "Federal holiday honoring military veterans", "US"),
    ),
    # December
    (12, 25): (
        _event("Christmas Day", _HOLIDAY, "Federal holiday celebrating Christmas", "US"),
    ),
    (12, 31): (
        _event("New Year's Eve", _OBSERVANCE, "Celebration of the last day of the year"),
    ),
}

_facts: Dict[CalendarKey, Tuple[SpecialEvent, ...]] = {
    (1, 16): (
        _event("Prohibition began (1920)", _FACT, "The 18th Amendment went into effect, banning alcohol in the US"),
        _event("First Gulf War began (1991)", _FACT, "Operation Desert Storm launched against Iraq"),
    ),
    (7, 20): (
        _event("Moon Landing (1969)", _FACT, "Apollo 11 astronauts became the first humans to walk on the Moon"),
    ),
    (11, 9): (
        _event("Fall of the Berlin Wall (1989)", _FACT, "The Berlin Wall was opened, leading to German reunification"),
    ),
    (12, 17): (
        _event("First Powered Flight (1903)", _FACT, "The Wright Brothers achieved the first sustained powered flight"),
    ),
}

FIXED_DATE_EVENTS: Mapping[CalendarKey, Tuple[SpecialEvent, ...]] = MappingProxyType(_fixed)
HISTORICAL_FACTS: Mapping[CalendarKey, Tuple[SpecialEvent, ...]] = MappingProxyType(_facts)


def events_for_date(month: int, day: int) -> List[SpecialEvent]:
    """Return fixed-date events then historical facts for (month, day); empty if none."""
    key = (month, day)
    return [*FIXED_DATE_EVENTS.get(key, ()), *HISTORICAL_FACTS.get(key, ())]
