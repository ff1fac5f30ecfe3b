"""Exception hierarchy for car_listings."""


class CarListingsError(Exception):
    """Base exception for all car_listings errors."""


class StoreError(CarListingsError):
    """The record store failed to read or write a value."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class ResultError(CarListingsError):
    """Raised by ``Result.unwrap()`` when the result holds an error."""

    def __init__(self, error) -> None:
        self.error = error
        super().__init__(f"{error.kind.value}: {error.message}")
