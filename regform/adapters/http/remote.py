"""
Remote list endpoint adapter - Implements RegistrantStore protocol.

Registrants live behind a REST list resource (``GET``/``POST`` on
``{base_url}/users``), optionally bearer-authenticated.

POST failures are mapped to domain errors:
- 400: the endpoint rejected the email as already used
- 5xx or network failure: the endpoint is down
"""

import logging

import httpx

from regform.domain.exceptions import (
    DuplicateEmail,
    RegistrantsUnavailable,
    ServerUnavailable,
    StoreError,
)
from regform.domain.models import Registrant

logger = logging.getLogger(__name__)

USERS_PATH = "/users"


class HttpRegistrantStore:
    """
    Implements RegistrantStore protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    backend = "remote"

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            base_url: Base URL of the remote API
            token: Optional bearer token sent with every request
            timeout: Request timeout in seconds
            client: Preconfigured client (tests inject a mock transport)
        """
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "HttpRegistrantStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_registrants(self) -> list[Registrant]:
        """
        Fetch all registrants from the remote endpoint.

        Raises:
            RegistrantsUnavailable: On any transport or HTTP error
        """
        try:
            response = self._client.get(USERS_PATH)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to load users from %s: %s", self._client.base_url, e)
            raise RegistrantsUnavailable("Failed to load users from API") from e

        if not isinstance(payload, list):
            raise RegistrantsUnavailable("Failed to load users from API")
        return [Registrant.from_dict(item) for item in payload if isinstance(item, dict)]

    def add_registrant(self, registrant: Registrant) -> Registrant:
        """
        Post a registrant to the remote endpoint.

        Returns:
            The registrant with the id assigned by the endpoint, if any

        Raises:
            DuplicateEmail: If the endpoint answers 400
            ServerUnavailable: If the endpoint answers 5xx or is unreachable
            StoreError: For any other HTTP error status
        """
        try:
            response = self._client.post(USERS_PATH, json=registrant.to_dict())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("Registration for %s rejected with %s", registrant.email, status_code)
            if status_code == 400:
                raise DuplicateEmail("Email already exists") from e
            if status_code >= 500:
                raise ServerUnavailable("Server is down") from e
            raise StoreError(f"Registration failed with status {status_code}") from e
        except httpx.RequestError as e:
            logger.error("Registration endpoint unreachable: %s", e)
            raise ServerUnavailable("Server is down") from e

        logger.info("Posted registrant %s", registrant.email)
        try:
            created = response.json()
        except ValueError:
            return registrant
        if not isinstance(created, dict):
            return registrant
        return Registrant.from_dict({**registrant.to_dict(), **created})
