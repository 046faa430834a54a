"""
Local JSON store adapter - Implements RegistrantStore protocol.

This module provides a key-value file implementation of the domain's
registrant store port. The full accumulated list is serialized as one
value under a fixed key and rewritten on every addition.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from regform.domain.exceptions import DuplicateEmail, StoreError
from regform.domain.models import Registrant

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "registeredUsers"


class JsonFileRegistrantStore:
    """
    Implements RegistrantStore protocol via a JSON key-value file.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A missing file is an empty store; writes replace the file atomically.
    """

    backend = "local"

    def __init__(self, path: str | Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        """
        Initialize store.

        Args:
            path: JSON file holding the key-value document
            key: Key under which the registrant list is stored
        """
        self._path = Path(path)
        self._key = key
        self._lock = threading.Lock()

    def _read_document(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read registrant store %s: %s", self._path, e)
            raise StoreError(f"Registrant store is unreadable: {self._path}") from e
        if not isinstance(document, dict):
            raise StoreError(f"Registrant store is malformed: {self._path}")
        items = document.get(self._key, [])
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise StoreError(f"Registrant store is malformed: {self._path}")
        return document

    def _write_document(self, document: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error("Failed to write registrant store %s: %s", self._path, e)
            raise StoreError(f"Registrant store is not writable: {self._path}") from e

    def list_registrants(self) -> list[Registrant]:
        """Return all stored registrants, oldest first."""
        with self._lock:
            document = self._read_document()
        return [Registrant.from_dict(item) for item in document.get(self._key, [])]

    def add_registrant(self, registrant: Registrant) -> Registrant:
        """
        Append a registrant and rewrite the whole list under the key.

        The email is re-checked under the lock, so concurrent submissions
        of the same address store it once. Other keys in the document are
        preserved.

        Raises:
            DuplicateEmail: If a stored registrant already uses the email
            StoreError: If the file cannot be read or written
        """
        with self._lock:
            document = self._read_document()
            items = list(document.get(self._key, []))
            if any(item.get("email") == registrant.email for item in items):
                logger.warning("Registrant %s already stored", registrant.email)
                raise DuplicateEmail("Email already exists")
            items.append(registrant.to_dict())
            document[self._key] = items
            self._write_document(document)

        logger.info("Stored registrant %s (%d total)", registrant.email, len(items))
        return registrant
