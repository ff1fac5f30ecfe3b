"""Car listing data models."""

from datetime import datetime, UTC

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


class CarPayload(BaseModel):
    """Data for creating or fully replacing a listing."""

    make: str = Field(..., min_length=1, description="Manufacturer (e.g., 'Toyota')")
    model: str = Field(..., min_length=1, description="Model name (e.g., 'Corolla')")
    year: int = Field(..., gt=0, strict=True, description="Model year")
    price: int = Field(..., ge=0, strict=True, description="Asking price")
    description: str = Field("", description="Free-form description")
    image_url: str = Field("", description="Link to a photo of the car")
    is_available: bool = Field(..., strict=True, description="Whether the car can currently be bought")
    owner_email: str = Field(..., description="Contact email of the seller")

    @field_validator("description", "image_url", mode="before")
    @classmethod
    def _blank_to_empty(cls, value):
        # Missing and null optional text both end up as ""
        return value or ""


class Car(CarPayload):
    """Full listing record as persisted in the store."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique listing ID")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    def to_json(self) -> str:
        """Serialize for storage using the camelCase timestamp names."""
        return self.model_dump_json(by_alias=True)
