"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.user import User
from tripsplit.models.trip import Trip, TripMember
from tripsplit.schemas.trip import (
    TripCreate, TripResponse, TripSummaryResponse,
    MemberChange, MemberChangeResponse
)
from tripsplit.api.dependencies import get_current_user, get_member_trip
from tripsplit.services import trip_service

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[TripResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips the current user is a member of."""
    trips = db.query(Trip).join(TripMember).filter(
        TripMember.username == current_user.username
    ).order_by(Trip.id).all()
    return [TripResponse.from_trip(t) for t in trips]


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip with the current user as creator."""
    trip = trip_service.create_trip(
        name=trip_data.name,
        creator=current_user.username,
        member_usernames=trip_data.member_usernames,
        country=trip_data.country,
        budget=trip_data.budget,
        db=db
    )
    return TripResponse.from_trip(trip)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(trip: Trip = Depends(get_member_trip)):
    """Get trip details."""
    return TripResponse.from_trip(trip)


@router.delete("/{trip_id}")
async def delete_trip(
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Delete a trip together with its members and expenses."""
    db.delete(trip)
    db.commit()
    return {"message": "Trip deleted"}


@router.post("/{trip_id}/add-member", response_model=MemberChangeResponse)
async def add_member(
    change: MemberChange,
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Add a username to the trip."""
    if change.username in trip.member_usernames:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Already a member"
        )

    trip.members.append(TripMember(username=change.username, is_creator=False))
    db.commit()
    db.refresh(trip)

    return {"message": "Member added", "trip": TripResponse.from_trip(trip)}


@router.post("/{trip_id}/remove-member", response_model=MemberChangeResponse)
async def remove_member(
    change: MemberChange,
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Remove a member from the trip along with the expenses they paid."""
    try:
        trip = trip_service.remove_member(trip, change.username, db)
    except LookupError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found"
        )

    return {"message": "Member removed", "trip": TripResponse.from_trip(trip)}


@router.get("/{trip_id}/summary", response_model=TripSummaryResponse)
async def get_trip_summary(
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Get spending total, display currency and budget status."""
    return trip_service.summarize_trip(trip, db)
