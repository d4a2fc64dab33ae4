"""
Domain errors raised by the service layer.

Routes let these propagate; main.py maps each one to an HTTP response.
"""


class TripSplitError(Exception):
    """Base class for all domain errors."""


class InvalidTripState(TripSplitError):
    """A trip is in a state the settlement engine cannot work with (e.g. no members)."""


class InvalidAmount(TripSplitError, ValueError):
    """An expense amount is negative, non-finite or not a number."""


class RecognitionFailed(TripSplitError):
    """The text-recognition provider could not read the receipt image."""


class ConversionFailed(TripSplitError):
    """The currency conversion provider rejected or failed the request."""
