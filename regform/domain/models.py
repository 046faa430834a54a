"""
Domain models - Candidate and accepted registrations.

CandidateRegistration is the unvalidated input produced by the boundary
parse step; Registrant is an accepted registration ready for storage.
Both serialize with the camelCase wire names used by the form and the
remote list endpoint.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from .age import UnparsableDate, parse_birth_date


class FormField(str, Enum):
    """Wire names of the registration form fields."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    BIRTH_DATE = "birthDate"
    CITY = "city"
    POSTAL_CODE = "postalCode"


_SNAKE_NAMES = {
    FormField.FIRST_NAME: "first_name",
    FormField.LAST_NAME: "last_name",
    FormField.EMAIL: "email",
    FormField.BIRTH_DATE: "birth_date",
    FormField.CITY: "city",
    FormField.POSTAL_CODE: "postal_code",
}


def _raw(data: Mapping[str, Any], field: FormField) -> Any:
    if field.value in data:
        return data[field.value]
    return data.get(_SNAKE_NAMES[field])


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class CandidateRegistration:
    """Unvalidated registration; every field is checked independently."""

    first_name: str
    last_name: str
    email: str
    birth_date: Any
    city: str
    postal_code: str

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "CandidateRegistration":
        """
        Parse raw form values into a candidate.

        Accepts wire names (``firstName``) or snake_case keys. Missing text
        fields become empty strings; the birth date is parsed into a
        ``date`` or an ``UnparsableDate``.
        """
        return cls(
            first_name=_text(_raw(data, FormField.FIRST_NAME)),
            last_name=_text(_raw(data, FormField.LAST_NAME)),
            email=_text(_raw(data, FormField.EMAIL)),
            birth_date=parse_birth_date(_raw(data, FormField.BIRTH_DATE)),
            city=_text(_raw(data, FormField.CITY)),
            postal_code=_text(_raw(data, FormField.POSTAL_CODE)),
        )


@dataclass(frozen=True)
class Registrant:
    """Accepted registration with its generation timestamp."""

    first_name: str
    last_name: str
    email: str
    birth_date: date | None
    city: str
    postal_code: str
    timestamp: datetime | None = None
    id: int | str | None = None

    @classmethod
    def from_candidate(
        cls, candidate: CandidateRegistration, timestamp: datetime
    ) -> "Registrant":
        """Build a registrant from a candidate that passed validation."""
        birth_date = candidate.birth_date
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()
        return cls(
            first_name=candidate.first_name.strip(),
            last_name=candidate.last_name.strip(),
            email=candidate.email,
            birth_date=birth_date,
            city=candidate.city.strip(),
            postal_code=candidate.postal_code,
            timestamp=timestamp,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Registrant":
        """
        Load a stored registrant.

        Tolerates partial records from the remote endpoint: missing text
        fields become empty strings and unreadable dates become None.
        """
        birth_date = parse_birth_date(_raw(data, FormField.BIRTH_DATE))
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            try:
                timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
            except ValueError:
                timestamp = None
        elif not isinstance(timestamp, datetime):
            timestamp = None

        return cls(
            first_name=_text(_raw(data, FormField.FIRST_NAME)),
            last_name=_text(_raw(data, FormField.LAST_NAME)),
            email=_text(_raw(data, FormField.EMAIL)),
            birth_date=None if isinstance(birth_date, UnparsableDate) else birth_date,
            city=_text(_raw(data, FormField.CITY)),
            postal_code=_text(_raw(data, FormField.POSTAL_CODE)),
            timestamp=timestamp,
            id=data.get("id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire names and ISO 8601 dates."""
        data: dict[str, Any] = {
            FormField.FIRST_NAME.value: self.first_name,
            FormField.LAST_NAME.value: self.last_name,
            FormField.EMAIL.value: self.email,
            FormField.BIRTH_DATE.value: self.birth_date.isoformat() if self.birth_date else None,
            FormField.CITY.value: self.city,
            FormField.POSTAL_CODE.value: self.postal_code,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
        if self.id is not None:
            data["id"] = self.id
        return data
