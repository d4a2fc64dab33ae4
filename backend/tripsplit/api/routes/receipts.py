"""
Receipt scan route for prefilling expenses.
"""
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from tripsplit.core.config import settings
from tripsplit.models.user import User
from tripsplit.schemas.receipt import ReceiptScanResult
from tripsplit.api.dependencies import get_current_user
from tripsplit.services import receipt_service

router = APIRouter(tags=["receipts"])


@router.post("/receipt-scan", response_model=ReceiptScanResult)
async def scan_receipt(
    receipt: UploadFile = File(...),
    current_user: User = Depends(get_current_user)
):
    """Upload a receipt image and get a suggested amount and date."""
    if receipt.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only images allowed"
        )

    content = await receipt.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file received"
        )
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File too large"
        )

    return await receipt_service.scan_receipt(content, receipt.filename)
