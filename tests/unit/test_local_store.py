"""
Unit tests for JsonFileRegistrantStore adapter.

Tests verify the store implements the RegistrantStore protocol and
keeps the full list under one key of a JSON document.
"""

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from regform.adapters.storage.local import JsonFileRegistrantStore
from regform.domain.exceptions import DuplicateEmail, StoreError
from regform.domain.models import Registrant
from regform.domain.registration import RegistrationService


def make_registrant(email: str) -> Registrant:
    return Registrant(
        first_name="Jean",
        last_name="Dupont",
        email=email,
        birth_date=date(1995, 1, 10),
        city="Paris",
        postal_code="75001",
        timestamp=datetime(2025, 6, 15, 9, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def path(tmp_path: Path) -> Path:
    return tmp_path / "registrations.json"


class TestProtocol:
    """Tests for RegistrantStore protocol compliance."""

    def test_no_explicit_inheritance(self) -> None:
        assert JsonFileRegistrantStore.__bases__ == (object,)


class TestListRegistrants:
    """Tests for reading the store."""

    def test_missing_file_is_empty(self, path: Path) -> None:
        assert JsonFileRegistrantStore(path).list_registrants() == []

    def test_empty_file_is_empty(self, path: Path) -> None:
        path.write_text("")
        assert JsonFileRegistrantStore(path).list_registrants() == []

    def test_missing_key_is_empty(self, path: Path) -> None:
        path.write_text(json.dumps({"other": [1, 2]}))
        assert JsonFileRegistrantStore(path).list_registrants() == []

    def test_corrupt_file_raises(self, path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path.write_text("{not json")
        with caplog.at_level(logging.ERROR), pytest.raises(StoreError):
            JsonFileRegistrantStore(path).list_registrants()
        assert "Failed to read registrant store" in caplog.text

    def test_malformed_document_raises(self, path: Path) -> None:
        path.write_text(json.dumps({"registeredUsers": "nope"}))
        with pytest.raises(StoreError):
            JsonFileRegistrantStore(path).list_registrants()

    @pytest.mark.parametrize("item", [1, "a@example.com", None, ["a@example.com"]])
    def test_non_mapping_item_raises(self, path: Path, item: object) -> None:
        """Every stored registrant must be a JSON object."""
        path.write_text(json.dumps({"registeredUsers": [item]}))
        with pytest.raises(StoreError, match="malformed"):
            JsonFileRegistrantStore(path).list_registrants()

    def test_non_mapping_item_blocks_addition(self, path: Path) -> None:
        path.write_text(json.dumps({"registeredUsers": [1]}))
        with pytest.raises(StoreError, match="malformed"):
            JsonFileRegistrantStore(path).add_registrant(make_registrant("a@example.com"))
        assert json.loads(path.read_text()) == {"registeredUsers": [1]}


class TestAddRegistrant:
    """Tests for writing the store."""

    def test_round_trip(self, path: Path) -> None:
        store = JsonFileRegistrantStore(path)
        registrant = make_registrant("a@example.com")

        assert store.add_registrant(registrant) is registrant
        assert store.list_registrants() == [registrant]

    def test_list_stored_under_fixed_key(self, path: Path) -> None:
        store = JsonFileRegistrantStore(path)
        store.add_registrant(make_registrant("a@example.com"))
        store.add_registrant(make_registrant("b@example.com"))

        document = json.loads(path.read_text())
        assert list(document) == ["registeredUsers"]
        assert [item["email"] for item in document["registeredUsers"]] == [
            "a@example.com",
            "b@example.com",
        ]

    def test_custom_key(self, path: Path) -> None:
        store = JsonFileRegistrantStore(path, key="users")
        store.add_registrant(make_registrant("a@example.com"))
        assert "users" in json.loads(path.read_text())

    def test_other_keys_preserved(self, path: Path) -> None:
        path.write_text(json.dumps({"theme": "dark"}))
        JsonFileRegistrantStore(path).add_registrant(make_registrant("a@example.com"))
        assert json.loads(path.read_text())["theme"] == "dark"

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "registrations.json"
        JsonFileRegistrantStore(path).add_registrant(make_registrant("a@example.com"))
        assert path.exists()

    def test_logs_stored_registrant(self, path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            JsonFileRegistrantStore(path).add_registrant(make_registrant("a@example.com"))
        assert "Stored registrant a@example.com (1 total)" in caplog.text

    def test_concurrent_additions_all_kept(self, path: Path) -> None:
        store = JsonFileRegistrantStore(path)
        emails = [f"user{i}@example.com" for i in range(20)]

        with ThreadPoolExecutor(max_workers=5) as executor:
            futures = [executor.submit(store.add_registrant, make_registrant(e)) for e in emails]
            for f in futures:
                f.result()

        assert sorted(r.email for r in store.list_registrants()) == sorted(emails)

    def test_duplicate_email_rejected(self, path: Path, caplog: pytest.LogCaptureFixture) -> None:
        store = JsonFileRegistrantStore(path)
        store.add_registrant(make_registrant("a@example.com"))

        with caplog.at_level(logging.WARNING), pytest.raises(DuplicateEmail) as exc_info:
            store.add_registrant(make_registrant("a@example.com"))

        assert str(exc_info.value) == "Email already exists"
        assert "Registrant a@example.com already stored" in caplog.text
        assert len(store.list_registrants()) == 1

    def test_concurrent_same_email_stored_once(self, path: Path) -> None:
        store = JsonFileRegistrantStore(path)

        def attempt() -> str:
            try:
                store.add_registrant(make_registrant("same@example.com"))
                return "stored"
            except DuplicateEmail:
                return "duplicate"

        with ThreadPoolExecutor(max_workers=5) as executor:
            results = list(executor.map(lambda _: attempt(), range(10)))

        assert results.count("stored") == 1
        assert results.count("duplicate") == 9
        assert [r.email for r in store.list_registrants()] == ["same@example.com"]


class TestConcurrentRegistration:
    """Tests for registrations racing past the service's duplicate check."""

    def test_same_email_registered_once(self, path: Path, valid_form: dict[str, str]) -> None:
        """Both submissions pass validation; the store keeps only one."""
        store = JsonFileRegistrantStore(path)
        barrier = threading.Barrier(2)
        list_registrants = store.list_registrants

        def list_then_wait() -> list[Registrant]:
            registrants = list_registrants()
            barrier.wait(timeout=5)
            return registrants

        store.list_registrants = list_then_wait  # type: ignore[method-assign]
        service = RegistrationService(store=store)

        def attempt() -> str:
            try:
                service.register(valid_form)
                return "ok"
            except DuplicateEmail:
                return "duplicate"

        with ThreadPoolExecutor(max_workers=2) as executor:
            results = sorted(executor.map(lambda _: attempt(), range(2)))

        assert results == ["duplicate", "ok"]
        document = json.loads(path.read_text())
        assert [item["email"] for item in document["registeredUsers"]] == [
            "jean.dupont@example.com"
        ]
