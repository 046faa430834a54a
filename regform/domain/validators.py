"""
Field validators - Pure checks for single registration fields.

Each validator returns None when the value is acceptable and raises
exactly one FieldValidationError subclass otherwise.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from email_validator import EmailNotValidError
from email_validator import validate_email as check_email_syntax

from .exceptions import DuplicateEmail, EmptyField, InvalidFormat

# Letters (ASCII and Latin-1 accented) joined by single spaces, hyphens or apostrophes
_LETTERS = "A-Za-zÀ-ÖØ-öø-ÿ"
NAME_PATTERN = re.compile(rf"[{_LETTERS}]+(?:[ '\-][{_LETTERS}]+)*")

POSTAL_CODE_PATTERN = re.compile(r"[0-9]{5}")


def _validate_alphabetic(value: Any, label: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise EmptyField(f"{label} is required")
    if not isinstance(value, str) or not NAME_PATTERN.fullmatch(value.strip()):
        raise InvalidFormat(f"{label} must contain only letters")


def validate_identity(name: Any, label: str = "Name") -> None:
    """
    Validate a first or last name.

    Raises:
        EmptyField: If the trimmed name is empty
        InvalidFormat: If the name contains digits or symbols
    """
    _validate_alphabetic(name, label)


def validate_city(city: Any) -> None:
    """
    Validate a city name.

    Raises:
        EmptyField: If the trimmed city is empty
        InvalidFormat: If the city contains digits or symbols
    """
    _validate_alphabetic(city, "City")


def _email_of(registrant: Any) -> Any:
    if isinstance(registrant, Mapping):
        return registrant.get("email")
    return getattr(registrant, "email", None)


def validate_email(email: Any, existing_registrants: Iterable[Any] = ()) -> None:
    """
    Validate an email address and its uniqueness.

    Syntax is checked first, so a malformed address is never reported
    as a duplicate. Uniqueness is an exact string match against the
    ``email`` of each existing registrant.

    Args:
        email: Raw email address
        existing_registrants: Registrants exposing ``email`` (attribute or key)

    Raises:
        InvalidFormat: If the address is not a valid local@domain address
        DuplicateEmail: If an existing registrant already uses the address
    """
    if not isinstance(email, str) or not email:
        raise InvalidFormat("Invalid email format")
    try:
        check_email_syntax(email, check_deliverability=False)
    except EmailNotValidError:
        raise InvalidFormat("Invalid email format") from None

    if any(_email_of(registrant) == email for registrant in existing_registrants):
        raise DuplicateEmail("Email already exists")


def validate_postal_code(code: Any) -> None:
    """
    Validate a postal code.

    Raises:
        InvalidFormat: Unless the code is exactly 5 digits
    """
    if not isinstance(code, str) or not POSTAL_CODE_PATTERN.fullmatch(code):
        raise InvalidFormat("Postal code must be exactly 5 digits")
