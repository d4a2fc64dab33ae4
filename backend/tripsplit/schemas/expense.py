"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    description: str = Field(min_length=1)
    date: Optional[dt_date] = None


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    paid_by_username: str = Field(min_length=1, max_length=50)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Description must not be blank")
        return v.strip()


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: int
    trip_id: int
    paid_by: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
