"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation and eligibility engine for form
registrations. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .age import UnparsableDate, calculate_age, check_minimum_age, parse_birth_date
from .exceptions import (
    DuplicateEmail,
    EmptyField,
    FieldValidationError,
    InvalidDate,
    InvalidFormat,
    MissingParameter,
    RegistrantsUnavailable,
    RegistrationError,
    RegistrationRejected,
    ServerUnavailable,
    StoreError,
    Underage,
    WrongType,
)
from .form import ValidationOutcome, validate_form
from .models import CandidateRegistration, FormField, Registrant
from .ports import RegistrantStore
from .registration import RegistrationService
from .validators import validate_city, validate_email, validate_identity, validate_postal_code

__all__ = [
    "CandidateRegistration",
    "DuplicateEmail",
    "EmptyField",
    "FieldValidationError",
    "FormField",
    "InvalidDate",
    "InvalidFormat",
    "MissingParameter",
    "RegistrantStore",
    "Registrant",
    "RegistrantsUnavailable",
    "RegistrationError",
    "RegistrationRejected",
    "RegistrationService",
    "ServerUnavailable",
    "StoreError",
    "Underage",
    "UnparsableDate",
    "ValidationOutcome",
    "WrongType",
    "calculate_age",
    "check_minimum_age",
    "parse_birth_date",
    "validate_city",
    "validate_email",
    "validate_form",
    "validate_identity",
    "validate_postal_code",
]
