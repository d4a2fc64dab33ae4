"""
Currency conversion route (display only, nothing is stored).
"""
from fastapi import APIRouter, Depends, Query
from tripsplit.models.user import User
from tripsplit.api.dependencies import get_current_user
from tripsplit.services.currency_service import convert_currency

router = APIRouter(tags=["fx"])


@router.get("/convert")
async def convert(
    from_currency: str = Query(..., alias="from", min_length=3, max_length=3),
    to_currency: str = Query(..., alias="to", min_length=3, max_length=3),
    amount: float = Query(..., ge=0),
    current_user: User = Depends(get_current_user)
):
    """Convert an amount between two currencies."""
    return await convert_currency(from_currency, to_currency, amount)
