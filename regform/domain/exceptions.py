"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
validation and persistence failures without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class FieldValidationError(RegistrationError):
    """
    A single field failed one validation rule.

    Subclasses name the violated rule; ``message`` is the text shown
    for the field in a validation outcome.
    """

    default_message = "Invalid value"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyField(FieldValidationError):
    """Required field is missing or blank."""

    default_message = "Field is required"


class InvalidFormat(FieldValidationError):
    """Field value does not match the expected format."""

    default_message = "Invalid format"


class DuplicateEmail(FieldValidationError):
    """Email is already used by an existing registrant."""

    default_message = "Email already exists"


class MissingParameter(FieldValidationError):
    """Age calculation input or its birth date is missing."""

    pass


class WrongType(FieldValidationError):
    """Age calculation input has the wrong type."""

    pass


class InvalidDate(FieldValidationError):
    """Birth date does not name a calendar day."""

    default_message = "Invalid date"


class Underage(FieldValidationError):
    """Registrant is younger than the configured minimum age."""

    pass


class RegistrationRejected(RegistrationError):
    """Candidate registration failed validation on one or more fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(f"Validation failed for: {', '.join(sorted(self.errors))}")


class StoreError(RegistrationError):
    """Registrant store could not be read or written."""

    pass


class RegistrantsUnavailable(StoreError):
    """Existing registrants could not be loaded."""

    pass


class ServerUnavailable(StoreError):
    """Remote registrant endpoint is down or unreachable."""

    pass
