"""
Trip service for membership changes and spending summaries.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from tripsplit.core.exceptions import InvalidTripState
from tripsplit.core.utils import round_currency
from tripsplit.models.expense import Expense
from tripsplit.models.trip import Trip, TripMember
from tripsplit.schemas.trip import TripSummaryResponse
from tripsplit.services.currency_service import currency_for_country, currency_symbol
from tripsplit.services.settlement_service import calculate_trip_settlement

logger = logging.getLogger(__name__)


def create_trip(
    name: str,
    creator: str,
    member_usernames: List[str],
    country: str = None,
    budget=None,
    db: Session = None
) -> Trip:
    """Create a trip; the creator is always a member, duplicates collapse."""
    members = list(dict.fromkeys([creator, *member_usernames]))

    trip = Trip(name=name, country=country, budget=budget)
    db.add(trip)
    db.flush()

    for username in members:
        db.add(TripMember(trip_id=trip.id, username=username, is_creator=(username == creator)))

    db.commit()
    db.refresh(trip)
    return trip


def remove_member(trip: Trip, username: str, db: Session) -> Trip:
    """
    Remove a member and delete the expenses they paid.
    The creator and the last member cannot be removed.
    """
    member = next((m for m in trip.members if m.username == username), None)
    if member is None:
        raise LookupError(f"{username} is not a member of this trip")
    if member.is_creator:
        raise InvalidTripState("The trip creator cannot be removed")
    if len(trip.members) == 1:
        raise InvalidTripState("A trip must keep at least one member")

    trip.members.remove(member)
    deleted = db.query(Expense).filter(
        Expense.trip_id == trip.id,
        Expense.paid_by == username
    ).delete(synchronize_session=False)
    db.commit()
    db.refresh(trip)

    logger.info(f"Removed {username} from trip {trip.id} and {deleted} expenses they paid")
    return trip


def summarize_trip(trip: Trip, db: Session) -> TripSummaryResponse:
    """Spending total, display currency and budget tracking for a trip."""
    report = calculate_trip_settlement(trip, db)
    code = currency_for_country(trip.country)
    member_count = len(trip.members)

    summary = TripSummaryResponse(
        trip_id=trip.id,
        currency_code=code,
        currency_symbol=currency_symbol(code),
        total=report.total,
        member_count=member_count,
        average_per_member=round_currency(report.total / member_count),
    )

    if trip.budget is not None:
        budget = float(trip.budget)
        summary.budget = budget
        summary.budget_remaining = round_currency(budget - report.total)
        summary.is_over_budget = report.total > budget
        if budget > 0:
            summary.budget_percentage = round(report.total / budget * 100, 1)

    return summary
