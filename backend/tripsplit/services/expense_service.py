"""
Expense service for expense-related business logic.
"""
import logging
from sqlalchemy.orm import Session
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional
from tripsplit.core.exceptions import InvalidAmount
from tripsplit.models.expense import Expense

logger = logging.getLogger(__name__)


def validate_amount(amount) -> Decimal:
    """Normalize an incoming amount to a non-negative 2-decimal Decimal."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidAmount(f"Amount is not a number: {amount!r}") from e
    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite: {amount!r}")
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative: {amount!r}")
    return value.quantize(Decimal("0.01"))


def create_expense(
    trip_id: int,
    amount,
    paid_by: str,
    description: str,
    expense_date: Optional[date] = None,
    db: Session = None
) -> Expense:
    """Record an expense paid by a single member."""
    expense = Expense(
        trip_id=trip_id,
        amount=validate_amount(amount),
        paid_by=paid_by,
        description=description,
        date=expense_date
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)

    logger.info(f"Added expense {expense.id} to trip {trip_id}: {expense.amount} paid by {paid_by}")
    return expense


def list_expenses(trip_id: int, db: Session) -> List[Expense]:
    """Expenses of a trip, undated ones last, then in insertion order."""
    expenses = db.query(Expense).filter(Expense.trip_id == trip_id).all()
    expenses.sort(key=lambda e: (e.date is None, e.date or date.min, e.id))
    return expenses


def delete_expense(trip_id: int, expense_id: int, db: Session) -> bool:
    """Delete one expense of a trip. Returns False if it doesn't exist."""
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.trip_id == trip_id
    ).first()
    if not expense:
        return False

    db.delete(expense)
    db.commit()
    return True
