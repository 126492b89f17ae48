# app/core/exceptions.py


class ItineraryError(Exception):
    """Base class for errors raised while building an itinerary."""


class ValidationError(ItineraryError):
    """The request itself is malformed (empty interests, negative budget, ...)."""


class DataAccessError(ItineraryError):
    """A city, place or hotel read failed or timed out."""
