"""
Receipt scanning: text recognition via OCR.space plus best-effort field extraction.

`extract_receipt_fields` never fails; a field it cannot find is None.
`recognize_text` raises RecognitionFailed when the image cannot be read.
"""
import logging
import re
from typing import Optional
import httpx
from tripsplit.core.config import settings
from tripsplit.core.exceptions import RecognitionFailed
from tripsplit.schemas.receipt import ReceiptScanResult

logger = logging.getLogger(__name__)

# Optional currency marker, then the first run of ASCII digits. Decimals are not captured,
# amounts are whole currency units.
AMOUNT_PATTERN = re.compile(r'(?:₹|INR)?\s*([0-9]+)', re.IGNORECASE)

DATE_PATTERN = re.compile(
    r'([0-9]{4}[/\-.][0-9]{2}[/\-.][0-9]{2}|[0-9]{2}[/\-.][0-9]{2}[/\-.][0-9]{4})'
)
DATE_SEPARATORS = re.compile(r'[/\-.]')


def extract_amount(text: str) -> Optional[int]:
    """Return the first whole-number amount in the text, or None."""
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1))


def extract_date(text: str) -> Optional[str]:
    """
    Return the first date-shaped substring normalized to YYYY-MM-DD, or None.

    Accepts YYYY?MM?DD and DD?MM?YYYY with '/', '-' or '.' separators.
    Day and month are not range-checked.
    """
    match = DATE_PATTERN.search(text)
    if not match:
        return None

    found = match.group(1)
    if re.match(r'^[0-9]{4}[/\-.]', found):
        return DATE_SEPARATORS.sub('-', found)

    day, month, year = DATE_SEPARATORS.split(found)
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def extract_receipt_fields(text: str) -> ReceiptScanResult:
    """Guess amount and date from recognized receipt text."""
    return ReceiptScanResult(
        text=text,
        amount=extract_amount(text),
        date=extract_date(text),
    )


async def recognize_text(file_content: bytes, filename: str) -> str:
    """
    Run OCR.space text recognition on an image.
    Get API key: https://ocr.space/ocrapi/freekey
    """
    files = {
        "file": (filename or "receipt", file_content)
    }
    data = {
        "apikey": settings.OCR_API_KEY or "helloworld",  # Public demo key
        "language": settings.OCR_LANGUAGE,
        "isOverlayRequired": "false",
        "detectOrientation": "true",
    }

    logger.info(f"Sending {len(file_content)} bytes to OCR provider")
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                settings.OCR_API_URL, files=files, data=data, timeout=settings.OCR_TIMEOUT
            )
            response.raise_for_status()
            result = response.json()
    except httpx.HTTPError as e:
        logger.error(f"OCR request failed: {e}", exc_info=True)
        raise RecognitionFailed(str(e)) from e
    except ValueError as e:
        logger.error(f"OCR provider returned invalid JSON: {e}")
        raise RecognitionFailed("Invalid response from OCR provider") from e

    if result.get("OCRExitCode") == 1:
        parsed_results = result.get("ParsedResults") or []
        if parsed_results:
            return parsed_results[0].get("ParsedText", "") or ""

    error_message = result.get("ErrorMessage") or ["Unknown error"]
    if isinstance(error_message, list):
        error_message = error_message[0] if error_message else "Unknown error"
    raise RecognitionFailed(f"OCR.space error: {error_message}")


async def scan_receipt(file_content: bytes, filename: str) -> ReceiptScanResult:
    """Recognize a receipt image and extract its amount and date."""
    text = await recognize_text(file_content, filename)
    result = extract_receipt_fields(text)
    if result.amount is None and result.date is None:
        logger.warning(f"No amount or date found in receipt text. Preview: {text[:200]!r}")
    return result
