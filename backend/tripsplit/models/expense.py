"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single payment made by one member."""
    __tablename__ = "expenses"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    paid_by = Column(String(50), nullable=False, index=True)  # Payer username, may have left the trip since
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=True, index=True)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")

    @property
    def payer(self) -> str:
        return self.paid_by
