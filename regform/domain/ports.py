"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Registrant


class RegistrantStore(Protocol):
    """Port interface for registrant persistence."""

    def list_registrants(self) -> list[Registrant]:
        """
        Return all accepted registrations, oldest first.

        Raises:
            StoreError: If the registrations cannot be loaded
        """
        ...

    def add_registrant(self, registrant: Registrant) -> Registrant:
        """
        Persist an accepted registration.

        Args:
            registrant: Validated registrant with its generation timestamp

        Returns:
            The stored registrant, possibly enriched (e.g. with a remote id)

        Raises:
            DuplicateEmail: If the store rejects the email as already used
            ServerUnavailable: If the store is unreachable
            StoreError: For any other persistence failure
        """
        ...
