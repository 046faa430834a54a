"""
Form validation aggregator.

Runs every field validator against a candidate registration and
collects one message per failing field. Never raises for field
failures; the outcome carries them instead.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .age import calculate_age, check_minimum_age
from .exceptions import FieldValidationError
from .models import CandidateRegistration, FormField
from .validators import validate_city, validate_email, validate_identity, validate_postal_code


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating a whole form.

    ``errors`` maps wire field names to messages, only for failing fields.
    """

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


def _check_birth_date(birth_date: Any, today: date, minimum_age: int | None) -> None:
    age = calculate_age({"birth": birth_date}, today=today)
    check_minimum_age(age, minimum_age)


def validate_form(
    candidate: CandidateRegistration,
    existing_registrants: Iterable[Any] = (),
    *,
    today: date | None = None,
    minimum_age: int | None = None,
) -> ValidationOutcome:
    """
    Validate all fields of a candidate registration.

    Args:
        candidate: Parsed, unvalidated registration
        existing_registrants: Snapshot used for the email uniqueness check
        today: Reference date for the age calculation (read once if omitted)
        minimum_age: Optional eligibility threshold applied to the computed age

    Returns:
        ValidationOutcome with ``is_valid`` True iff no field failed
    """
    if today is None:
        today = date.today()
    registrants = tuple(existing_registrants)

    checks: tuple[tuple[FormField, Callable[[], None]], ...] = (
        (FormField.FIRST_NAME, lambda: validate_identity(candidate.first_name, "First name")),
        (FormField.LAST_NAME, lambda: validate_identity(candidate.last_name, "Last name")),
        (FormField.EMAIL, lambda: validate_email(candidate.email, registrants)),
        (FormField.POSTAL_CODE, lambda: validate_postal_code(candidate.postal_code)),
        (FormField.CITY, lambda: validate_city(candidate.city)),
        (FormField.BIRTH_DATE, lambda: _check_birth_date(candidate.birth_date, today, minimum_age)),
    )

    errors: dict[str, str] = {}
    for form_field, check in checks:
        try:
            check()
        except FieldValidationError as e:
            errors[form_field.value] = e.message

    return ValidationOutcome(is_valid=not errors, errors=errors)
