"""Base event data source interface."""
from abc import ABC, abstractmethod
from datetime import date
from typing import List
from today_api.models.event import SpecialEvent


class EventDataSource(ABC):
    """Abstract base class for event data sources."""

    @abstractmethod
    def events_for_date(self, month: int, day: int) -> List[SpecialEvent]:
        """
        Get fixed-date events and historical facts for a calendar day.

        Args:
            month: Month (1-12)
            day: Day of month

        Returns:
            Fixed-date events first, then historical facts; empty if none
        """
        pass

    @abstractmethod
    def floating_events_for_date(self, target: date) -> List[SpecialEvent]:
        """
        Get rule-based holidays (e.g. Thanksgiving) that fall on a date.

        Args:
            target: Civil date to check

        Returns:
            Matching floating holidays in rule order
        """
        pass
