"""
Settlement routes. Reports are recomputed on every request and never stored.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tripsplit.db.session import get_db
from tripsplit.models.trip import Trip
from tripsplit.schemas.settlement import SettlementReportResponse
from tripsplit.api.dependencies import get_member_trip
from tripsplit.services.settlement_service import calculate_trip_settlement

router = APIRouter(prefix="/trips", tags=["settlement"])


@router.get("/{trip_id}/settlements", response_model=SettlementReportResponse)
async def get_settlements(
    trip: Trip = Depends(get_member_trip),
    db: Session = Depends(get_db)
):
    """Who owes whom to bring every balance to zero."""
    report = calculate_trip_settlement(trip, db)
    return SettlementReportResponse.from_report(report)
