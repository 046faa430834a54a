"""HTTP adapters - Remote registrant list endpoint."""

from .remote import HttpRegistrantStore

__all__ = ["HttpRegistrantStore"]
