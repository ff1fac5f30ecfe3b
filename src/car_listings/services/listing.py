"""Listing service: validation and mutation of car records.

Every operation returns a :class:`Result` instead of raising. Validation
and existence checks always run before the store is written, so a failed
call leaves the stored records exactly as they were.
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from ..db.store import CarStore
from ..exceptions import StoreError
from ..models.car import Car, CarPayload, utc_now
from .result import ErrorKind, Result

logger = logging.getLogger(__name__)

PayloadLike = CarPayload | Mapping[str, Any]


def _not_found(car_id: str) -> Result:
    logger.warning("Car %s not found", car_id)
    return Result.failure(ErrorKind.NOT_FOUND, f"Car with ID={car_id} not found.")


def _fields(payload: CarPayload) -> dict[str, Any]:
    return payload.model_dump(include=set(CarPayload.model_fields))


def _invalid_id() -> Result:
    return Result.failure(ErrorKind.VALIDATION, "Invalid Id")


def _storage_failure(action: str, exc: StoreError) -> Result:
    logger.exception("Failed to %s", action)
    return Result.failure(ErrorKind.STORAGE, f"Failed to {action}: {exc}")


class ListingService:
    """Create, update, toggle and read car listings held in a ``CarStore``."""

    def __init__(self, store: CarStore, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.clock = clock

    def _validate(self, payload: PayloadLike) -> CarPayload | Result:
        try:
            return CarPayload.model_validate(payload)
        except ValidationError as e:
            logger.warning("Rejected payload: %s", e.errors(include_url=False))
            return Result.failure(
                ErrorKind.VALIDATION,
                "Invalid payload properties",
                details=e.errors(include_url=False),
            )

    def create_listing(self, payload: PayloadLike) -> Result[Car]:
        """Validate a payload and store it as a new listing.

        Args:
            payload: Car details, as a CarPayload or a plain mapping.

        Returns:
            Result holding the stored car with its generated ID.
        """
        validated = self._validate(payload)
        if isinstance(validated, Result):
            return validated

        with self.store.lock:
            try:
                # created_at never goes backwards in insertion order
                created_at = self.clock()
                last = self.store.last()
                if last is not None and last.created_at > created_at:
                    created_at = last.created_at

                car = Car(
                    id=str(uuid.uuid4()),
                    created_at=created_at,
                    updated_at=None,
                    **_fields(validated),
                )
                self.store.insert(car.id, car)
            except StoreError as e:
                return _storage_failure("create car listing", e)

        logger.info("Created listing %s (%s %s)", car.id, car.make, car.model)
        return Result.success(car)

    def update_listing(self, car_id: str, payload: PayloadLike) -> Result[Car]:
        """Replace every mutable field of an existing listing.

        ``id`` and ``created_at`` are preserved; ``updated_at`` is set to
        the current time.

        Args:
            car_id: ID of the listing to update.
            payload: Replacement details.

        Returns:
            Result holding the updated car.
        """
        if not car_id:
            return _invalid_id()

        validated = self._validate(payload)
        if isinstance(validated, Result):
            return validated

        with self.store.lock:
            try:
                existing = self.store.get(car_id)
                if existing is None:
                    return _not_found(car_id)

                updated = existing.model_copy(
                    update={**_fields(validated), "updated_at": self.clock()}
                )
                self.store.insert(updated.id, updated)
            except StoreError as e:
                return _storage_failure("update car listing", e)

        logger.info("Updated listing %s", car_id)
        return Result.success(updated)

    def toggle_availability(self, car_id: str) -> Result[None]:
        """Flip the ``is_available`` flag of a listing."""
        if not car_id:
            return _invalid_id()

        with self.store.lock:
            try:
                existing = self.store.get(car_id)
                if existing is None:
                    return _not_found(car_id)

                updated = existing.model_copy(
                    update={
                        "is_available": not existing.is_available,
                        "updated_at": self.clock(),
                    }
                )
                self.store.insert(updated.id, updated)
            except StoreError as e:
                return _storage_failure("toggle car availability", e)

        logger.info("Listing %s is_available=%s", car_id, updated.is_available)
        return Result.success(None)

    def list_all(self) -> Result[list[Car]]:
        """Get every listing in store order."""
        try:
            return Result.success(self.store.values())
        except StoreError:
            logger.exception("Failed to retrieve car listings")
            return Result.failure(ErrorKind.STORAGE, "Failed to retrieve car listings")

    def get_by_id(self, car_id: str) -> Result[Car]:
        """Get a single listing.

        Args:
            car_id: The listing ID. Must be non-empty.

        Returns:
            Result holding the car, or a validation/not-found error.
        """
        if not car_id:
            return _invalid_id()

        try:
            car = self.store.get(car_id)
        except StoreError as e:
            return _storage_failure("retrieve car by ID", e)

        if car is None:
            return _not_found(car_id)
        return Result.success(car)
