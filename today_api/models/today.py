"""Response models for the HTTP endpoints."""
from datetime import date, datetime
from typing import List
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from .event import SpecialEvent


class TodayResponse(BaseModel):
    """What is special about today's date in the configured timezone."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "date": "2024-07-04",
                "dayOfWeek": "Thursday",
                "timezone": "America/New_York (EDT, UTC-4)",
                "isDaylightSavingTime": True,
                "events": [
                    {
                        "name": "Independence Day",
                        "type": "PublicHoliday",
                        "description": "Federal holiday celebrating the Declaration of Independence",
                        "region": "US",
                    }
                ],
                "message": "Today is Independence Day!",
            }
        },
    )

    date: date
    day_of_week: str = Field(..., description="Full weekday name, e.g. 'Monday'")
    timezone: str = Field(..., description="Timezone label reflecting the active offset")
    is_daylight_saving_time: bool = Field(..., description="Whether daylight saving time is in effect")
    events: List[SpecialEvent] = Field(default_factory=list, description="Events for today, in display order")
    message: str = Field(..., description="Friendly summary of what's special about today")


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "Healthy"
    timestamp: datetime


class ServiceInfo(BaseModel):
    """Root endpoint response."""

    message: str
    version: str
