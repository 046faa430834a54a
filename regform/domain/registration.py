"""
Registration domain service.

Orchestrates a submission: boundary parse of the raw form, validation
against the current registrants, timestamping and hand-off to the
registrant store. Validation itself is pure; the service only adds
the store and the clock around it.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .exceptions import RegistrationRejected
from .form import ValidationOutcome, validate_form
from .models import CandidateRegistration, Registrant
from .ports import RegistrantStore


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class RegistrationService:
    """
    Domain service for form registration.

    ``minimum_age`` is an opt-in eligibility policy; ``clock`` supplies
    the submission moment (timezone-aware) and is read once per call.
    """

    store: RegistrantStore
    minimum_age: int | None = None
    clock: Callable[[], datetime] = _local_now

    def validate(self, form: Mapping[str, Any]) -> ValidationOutcome:
        """Validate raw form values without persisting anything."""
        candidate = CandidateRegistration.from_form(form)
        return validate_form(
            candidate,
            self.store.list_registrants(),
            today=self.clock().date(),
            minimum_age=self.minimum_age,
        )

    def register(self, form: Mapping[str, Any]) -> Registrant:
        """
        Validate raw form values and store the accepted registrant.

        Args:
            form: Raw form values keyed by wire or snake_case names

        Returns:
            The stored registrant

        Raises:
            RegistrationRejected: If any field fails validation
            DuplicateEmail: If the store already holds the email at write time
            StoreError: If the store cannot load or persist registrants
        """
        candidate = CandidateRegistration.from_form(form)
        now = self.clock()
        outcome = validate_form(
            candidate,
            self.store.list_registrants(),
            today=now.date(),
            minimum_age=self.minimum_age,
        )
        if not outcome.is_valid:
            raise RegistrationRejected(outcome.errors)

        return self.store.add_registrant(Registrant.from_candidate(candidate, timestamp=now))

    def list_registrants(self) -> list[Registrant]:
        """Return the accumulated registrations."""
        return self.store.list_registrants()
