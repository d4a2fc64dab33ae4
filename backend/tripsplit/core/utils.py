"""
Utility functions for the application.
"""
from typing import Any, Dict, Union
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def round_currency(value: Union[float, int, Decimal]) -> float:
    """Round a monetary value to 2 decimal places, halves away from zero."""
    # str() first so binary float noise (e.g. 2.675) doesn't pick the rounding direction
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"detail": message}
    if details:
        response["details"] = details
    return response
