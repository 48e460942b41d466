from .event import EventCategory, SpecialEvent
from .today import TodayResponse, HealthResponse, ServiceInfo

__all__ = [
    "EventCategory",
    "SpecialEvent",
    "TodayResponse",
    "HealthResponse",
    "ServiceInfo",
]
