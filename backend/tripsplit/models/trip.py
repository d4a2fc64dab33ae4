"""
Trip model for shared-trip expense tracking.
"""
from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing a group of members sharing costs."""
    __tablename__ = "trips"

    name = Column(String(200), nullable=False)
    country = Column(String(100), nullable=True)  # Only selects the display currency
    budget = Column(Numeric(15, 2), nullable=True)  # Optional spending ceiling

    # Relationships
    members = relationship(
        "TripMember",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripMember.id",
    )
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")

    @property
    def member_usernames(self) -> list:
        """Usernames in the order members joined the trip."""
        return [m.username for m in self.members]


class TripMember(BaseModel):
    """A username participating in a trip's cost sharing."""
    __tablename__ = "trip_members"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    username = Column(String(50), nullable=False, index=True)
    is_creator = Column(Boolean, default=False, nullable=False)

    # Relationships
    trip = relationship("Trip", back_populates="members")

    __table_args__ = (
        UniqueConstraint('trip_id', 'username', name='uq_trip_member'),
    )
