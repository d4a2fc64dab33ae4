"""Models package - Import all models for SQLAlchemy registration."""
from tripsplit.models.user import User, UserRole
from tripsplit.models.trip import Trip, TripMember
from tripsplit.models.expense import Expense

__all__ = [
    "User",
    "UserRole",
    "Trip",
    "TripMember",
    "Expense",
]
