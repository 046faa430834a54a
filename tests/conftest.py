"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fixed reference date for age calculations
- Raw form values that pass every validation rule
"""

from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed reference date (non-leap year)."""
    return date(2025, 6, 15)


@pytest.fixture
def valid_form() -> dict[str, str]:
    """Raw form values for a registrant aged 30 on the reference date."""
    return {
        "firstName": "Jean",
        "lastName": "Dupont",
        "email": "jean.dupont@example.com",
        "birthDate": "1995-01-10",
        "city": "Paris",
        "postalCode": "75001",
    }
