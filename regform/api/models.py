"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Bodies use the camelCase wire names of the registration form.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from regform.domain.models import Registrant


class WireModel(BaseModel):
    """Base model serializing with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegistrationRequest(WireModel):
    """
    Request model for a registration form submission.

    Fields are raw text; the domain validates them so that every failing
    field is reported at once instead of the first schema error.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    birth_date: str = Field("", description="Birth date in ISO 8601 format (YYYY-MM-DD)")
    city: str = ""
    postal_code: str = Field("", description="5-digit postal code")

    def to_form(self) -> dict[str, str]:
        """Return the raw form values keyed by wire name."""
        return self.model_dump(by_alias=True)


class RegistrantResponse(WireModel):
    """Response model for a stored registrant."""

    id: int | str | None = None
    first_name: str
    last_name: str
    email: str
    birth_date: date | None
    city: str
    postal_code: str
    timestamp: datetime | None

    @classmethod
    def from_registrant(cls, registrant: Registrant) -> "RegistrantResponse":
        return cls(
            id=registrant.id,
            first_name=registrant.first_name,
            last_name=registrant.last_name,
            email=registrant.email,
            birth_date=registrant.birth_date,
            city=registrant.city,
            postal_code=registrant.postal_code,
            timestamp=registrant.timestamp,
        )


class RegistrantListResponse(WireModel):
    """Response model for the list of registrants."""

    count: int
    registrants: list[RegistrantResponse]


class ValidationResponse(WireModel):
    """Response model for a validation-only submission."""

    is_valid: bool
    errors: dict[str, str]


class ValidationErrorDetail(BaseModel):
    """Per-field messages of a rejected registration."""

    message: str
    errors: dict[str, str]


class ValidationErrorResponse(BaseModel):
    """Error response for a rejected registration."""

    detail: ValidationErrorDetail


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
