"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from regform.adapters.http.remote import HttpRegistrantStore
from regform.adapters.storage.local import JsonFileRegistrantStore
from regform.config.settings import Settings, get_settings
from regform.domain.ports import RegistrantStore
from regform.domain.registration import RegistrationService


def build_registrant_store(settings: Settings) -> RegistrantStore:
    """Create the registrant store selected by ``storage_backend``."""
    if settings.storage_backend == "remote":
        return HttpRegistrantStore(
            base_url=settings.api_url,
            token=settings.api_token,
            timeout=settings.api_timeout_seconds,
        )
    return JsonFileRegistrantStore(settings.storage_path, key=settings.storage_key)


def get_registrant_store(request: Request) -> RegistrantStore:
    """
    Get registrant store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.store


def get_registration_service(
    store: RegistrantStore = Depends(get_registrant_store),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the store and the configured eligibility policy.
    """
    return RegistrationService(store=store, minimum_age=settings.minimum_age)
