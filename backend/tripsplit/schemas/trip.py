"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class TripBase(BaseModel):
    """Base trip schema."""
    name: str = Field(min_length=1, max_length=200)
    country: Optional[str] = None
    budget: Optional[Decimal] = Field(default=None, ge=0)

    @field_serializer("budget")
    def budget_as_number(self, v):
        return float(v) if v is not None else None


class TripCreate(TripBase):
    """Schema for trip creation. The creator is always added as a member."""
    member_usernames: List[str] = []

    @field_validator("member_usernames")
    @classmethod
    def strip_usernames(cls, v):
        return [u.strip() for u in v if u and u.strip()]


class TripMemberResponse(BaseModel):
    """Schema for trip member response."""
    username: str
    is_creator: bool

    model_config = ConfigDict(from_attributes=True)


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    members: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_trip(cls, trip) -> "TripResponse":
        return cls(
            id=trip.id,
            name=trip.name,
            country=trip.country,
            budget=trip.budget,
            members=trip.member_usernames,
            created_at=trip.created_at,
            updated_at=trip.updated_at,
        )


class MemberChange(BaseModel):
    """Schema for adding or removing a member."""
    username: str = Field(min_length=1, max_length=50)


class MemberChangeResponse(BaseModel):
    """Schema for the result of a membership change."""
    message: str
    trip: TripResponse


class TripSummaryResponse(BaseModel):
    """Schema for trip spending summary with budget tracking."""
    trip_id: int
    currency_code: str
    currency_symbol: str
    total: float
    member_count: int
    average_per_member: float
    budget: Optional[float] = None
    budget_percentage: Optional[float] = None  # total / budget * 100, 1 decimal
    budget_remaining: Optional[float] = None  # Negative when over budget
    is_over_budget: bool = False
