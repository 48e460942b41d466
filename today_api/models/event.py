"""Calendar event models."""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class EventCategory(str, Enum):
    """Kind of special event; drives how the summary message groups it."""

    PUBLIC_HOLIDAY = "PublicHoliday"
    OBSERVANCE = "Observance"
    INTERNATIONAL_DAY = "InternationalDay"
    HISTORICAL_FACT = "HistoricalFact"


class SpecialEvent(BaseModel):
    """A holiday, observance, international day or historical fact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Name of the event or holiday")
    category: EventCategory = Field(
        ...,
        alias="type",
        description="PublicHoliday, Observance, InternationalDay or HistoricalFact",
    )
    description: Optional[str] = Field(None, description="Additional context about the event")
    region: Optional[str] = Field(None, description="Country or region observing it (null for international)")
