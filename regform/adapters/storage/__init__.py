"""Storage adapters - Local registrant persistence."""

from .local import DEFAULT_STORAGE_KEY, JsonFileRegistrantStore

__all__ = ["DEFAULT_STORAGE_KEY", "JsonFileRegistrantStore"]
