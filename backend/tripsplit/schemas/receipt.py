"""
Pydantic schemas for receipt scanning.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ReceiptScanResult(BaseModel):
    """Advisory fields guessed from a receipt; the user reviews them before saving."""
    text: str
    amount: Optional[int] = None  # Whole currency units
    date: Optional[str] = Field(default=None, pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
