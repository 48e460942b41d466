"""Date info service: what is special about today."""
import logging
from datetime import datetime
from typing import List, Optional
from today_api.models.event import SpecialEvent
from today_api.models.today import TodayResponse
from today_api.services.date_resolver import DateResolver
from today_api.services.message import compose_message
from today_api.sources.base import EventDataSource

logger = logging.getLogger(__name__)


class DateInfoService:
    """Combines the resolved date, event source and message composer."""

    def __init__(self, source: EventDataSource, resolver: DateResolver):
        self.source = source
        self.resolver = resolver

    def get_today_info(self, now: Optional[datetime] = None) -> TodayResponse:
        """
        Describe today's date in the resolver's timezone.

        Args:
            now: Instant to treat as "now" (defaults to the resolver's clock)

        Returns:
            TodayResponse with events ordered fixed-date, historical, floating
        """
        resolved = self.resolver.resolve(now)
        today = resolved.date

        events: List[SpecialEvent] = []
        events.extend(self.source.events_for_date(today.month, today.day))
        events.extend(self.source.floating_events_for_date(today))

        logger.debug(f"Resolved {today.isoformat()} ({resolved.timezone_label}) with {len(events)} events")

        return TodayResponse(
            date=today,
            day_of_week=resolved.weekday_name,
            timezone=resolved.timezone_label,
            is_daylight_saving_time=resolved.is_dst,
            events=events,
            message=compose_message(today, events),
        )
