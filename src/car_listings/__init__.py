"""Car listing records backed by a durable key-value store."""

from .db.store import CarStore
from .models.car import Car, CarPayload
from .services.listing import ListingService
from .services.result import ErrorKind, ListingError, Result

__all__ = [
    "Car",
    "CarPayload",
    "CarStore",
    "ErrorKind",
    "ListingError",
    "ListingService",
    "Result",
]
