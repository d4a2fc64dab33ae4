"""
Expense management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.trip import Trip
from tripsplit.schemas.expense import ExpenseCreate, ExpenseResponse
from tripsplit.api.dependencies import get_member_trip
from tripsplit.services import expense_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """List all expenses of a trip."""
    return expense_service.list_expenses(trip.id, db)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Add an expense paid by one current member."""
    if expense_data.paid_by_username not in trip.member_usernames:
        logger.warning(f"Rejected expense for trip {trip.id}: payer {expense_data.paid_by_username} is not a member")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Payer must be a member of the trip"
        )

    return expense_service.create_expense(
        trip_id=trip.id,
        amount=expense_data.amount,
        paid_by=expense_data.paid_by_username,
        description=expense_data.description,
        expense_date=expense_data.date,
        db=db
    )


@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: int,
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    if not expense_service.delete_expense(trip.id, expense_id, db):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return {"message": "Expense deleted"}
