from .base import EventDataSource
from .in_memory import InMemoryEventDataSource
from .catalog import FIXED_DATE_EVENTS, HISTORICAL_FACTS, events_for_date

__all__ = [
    "EventDataSource",
    "InMemoryEventDataSource",
    "FIXED_DATE_EVENTS",
    "HISTORICAL_FACTS",
    "events_for_date",
]
