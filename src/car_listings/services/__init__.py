"""Listing service and result types."""

from .listing import ListingService
from .result import ErrorKind, ListingError, Result

__all__ = ["ErrorKind", "ListingError", "ListingService", "Result"]
