"""
Display currency for trips and a simple conversion helper.

A trip's country only picks the symbol shown next to amounts; no amounts are
ever converted when settling.
"""
import logging
from typing import Optional
import httpx
from tripsplit.core.config import settings
from tripsplit.core.exceptions import ConversionFailed

logger = logging.getLogger(__name__)

COUNTRY_CURRENCY = {
    "India": "INR",
    "United States": "USD",
    "United Kingdom": "GBP",
    "France": "EUR",
    "Japan": "JPY",
    "Germany": "EUR",
    "Canada": "CAD",
    "Australia": "AUD",
}

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "JPY": "¥",
    "CAD": "C$",
    "AUD": "A$",
}


def currency_for_country(country: Optional[str]) -> str:
    """Currency code for a trip's country, falling back to DEFAULT_CURRENCY."""
    if country:
        code = COUNTRY_CURRENCY.get(country.strip())
        if code:
            return code
    return settings.DEFAULT_CURRENCY.upper()


def currency_symbol(code: str) -> str:
    """Symbol for a currency code; unknown codes are shown as the code itself."""
    return CURRENCY_SYMBOLS.get(code.upper(), code.upper())


async def convert_currency(from_currency: str, to_currency: str, amount: float) -> dict:
    """
    Convert an amount using the configured exchangerate.host-style endpoint.
    Returns the provider's JSON payload unchanged.
    """
    params = {
        "from": from_currency.upper(),
        "to": to_currency.upper(),
        "amount": amount,
    }
    logger.info(f"Converting {amount} {params['from']} to {params['to']}")
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(settings.FX_API_URL, params=params, timeout=settings.FX_TIMEOUT)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as e:
        logger.error(f"Currency conversion request failed: {e}", exc_info=True)
        raise ConversionFailed(str(e)) from e
    except ValueError as e:
        raise ConversionFailed("Invalid response from conversion provider") from e

    if data.get("success") is False:
        info = (data.get("error") or {}).get("info") or "Conversion failed"
        raise ConversionFailed(info)

    return data
