"""In-memory event data source backed by the static catalog."""
from datetime import date
from typing import List, Tuple
from today_api.models.event import SpecialEvent
from today_api.services.floating import FLOATING_RULES, FloatingRule, floating_events_for_date
from today_api.sources.base import EventDataSource
from today_api.sources.catalog import events_for_date


class InMemoryEventDataSource(EventDataSource):
    """Serves events from the built-in tables and floating holiday rules."""

    def __init__(self, rules: Tuple[FloatingRule, ...] = FLOATING_RULES):
        self.rules = rules

    def events_for_date(self, month: int, day: int) -> List[SpecialEvent]:
        return events_for_date(month, day)

    def floating_events_for_date(self, target: date) -> List[SpecialEvent]:
        return floating_events_for_date(target, self.rules)
