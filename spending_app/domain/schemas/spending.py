import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spending_app.domain.models import Category, PersonalityType, SpendingEntry, SpendingSummary
from spending_app.utils.time import to_calendar_date, to_utc_iso_db


class CreateSpendingEntryRequest(BaseModel):
    """Request to record a spending entry"""
    date: dt.date = Field(..., description="Day of the expense (time of day is dropped)")
    category: Category = Field(..., description="Beer or Gym")
    amount: float = Field(..., gt=0, description="Amount spent, must be positive")
    description: Optional[str] = Field(None, description="Optional note")

    @field_validator("date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return to_calendar_date(value)


class SpendingEntryResponse(BaseModel):
    id: int
    date: dt.date
    category: Category
    amount: float
    description: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, entry: SpendingEntry) -> "SpendingEntryResponse":
        return cls(
            id=entry.id,
            date=entry.date,
            category=entry.category,
            amount=float(entry.amount),
            description=entry.description,
            created_at=to_utc_iso_db(entry.created_at),
        )


class SpendingSummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    beer_total: float = Field(..., alias="beerTotal")
    gym_total: float = Field(..., alias="gymTotal")
    total_spending: float = Field(..., alias="totalSpending")
    personality_type: PersonalityType = Field(..., alias="personalityType")

    @classmethod
    def from_summary(cls, summary: SpendingSummary) -> "SpendingSummaryResponse":
        return cls(
            beer_total=float(summary.beer_total),
            gym_total=float(summary.gym_total),
            total_spending=float(summary.total_spending),
            personality_type=summary.personality_type,
        )
