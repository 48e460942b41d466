from .floating import (
    FloatingRule,
    FLOATING_RULES,
    LAST,
    nth_weekday_of_month,
    last_weekday_of_month,
    floating_events_for_date,
)
from .message import compose_message
from .date_resolver import DateResolver, ResolvedDate, resolve_timezone
from .date_info import DateInfoService

__all__ = [
    "FloatingRule",
    "FLOATING_RULES",
    "LAST",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "floating_events_for_date",
    "compose_message",
    "DateResolver",
    "ResolvedDate",
    "resolve_timezone",
    "DateInfoService",
]
