"""PocketBase API client.

Authenticates as a superuser and fetches the collection schemas the
generator consumes.
"""

import json
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import CollectionSchema, parse_collections
from .logging_config import get_logger

logger = get_logger(__name__)

AUTH_PATH = "/api/collections/_superusers/auth-with-password"
# Servers before 0.23 authenticate admins on a dedicated endpoint
LEGACY_AUTH_PATH = "/api/admins/auth-with-password"
COLLECTIONS_PATH = "/api/collections"


class PocketBaseError(Exception):
    """Raised when talking to the PocketBase server fails."""

    pass


class PocketBaseClient:
    """Minimal client for the endpoints the generator needs."""

    def __init__(
        self,
        domain: str,
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        """
        Args:
            domain: Base URL of the PocketBase instance.
            timeout: Request timeout in seconds.
            session: Optional preconfigured requests session.
        """
        parsed = urlparse(domain)
        if not all([parsed.scheme, parsed.netloc]):
            raise PocketBaseError(f"Invalid PocketBase URL: {domain}")

        self.domain = domain.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.token: str | None = None

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.domain}{path}"
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = self.token

        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout for URL: {url}")
            raise PocketBaseError(f"Request timeout for URL: {url}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for URL {url}: {e}")
            raise PocketBaseError(f"Connection error for URL: {url}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for URL {url}: {e}", exc_info=True)
            raise PocketBaseError(f"Request error for URL {url}: {e}") from e

        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = response.status_code
            logger.error(f"HTTP error {status} for URL: {response.url}")
            raise PocketBaseError(f"HTTP error {status} for URL: {response.url}") from e

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Invalid JSON response from URL {response.url}: {e}")
            raise PocketBaseError(
                f"Invalid JSON response from URL {response.url}: {e}"
            ) from e

    def authenticate(self, email: str, password: str) -> str:
        """Authenticate as a superuser and keep the token for later requests.

        Args:
            email: Superuser (admin) email.
            password: Superuser (admin) password.

        Returns:
            The auth token.

        Raises:
            PocketBaseError: If authentication fails.
        """
        credentials = {"identity": email, "password": password}

        response = self._request("POST", AUTH_PATH, json=credentials)
        if response.status_code == 404:
            logger.debug("Superuser endpoint missing, trying legacy admin auth")
            response = self._request("POST", LEGACY_AUTH_PATH, json=credentials)

        data = self._json(response)
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise PocketBaseError("Authentication response did not contain a token")

        self.token = token
        logger.info(f"Authenticated with {self.domain} as {email}")
        return token

    def fetch_collections(self, per_page: int = 200) -> list[dict[str, Any]]:
        """Fetch every collection payload, following pagination.

        Raises:
            PocketBaseError: If a request fails or a page is malformed.
        """
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            response = self._request(
                "GET", COLLECTIONS_PATH, params={"page": page, "perPage": per_page}
            )
            data = self._json(response)
            if not isinstance(data, dict) or not isinstance(data.get("items"), list):
                raise PocketBaseError("Unexpected collections response format")

            items.extend(data["items"])
            total_pages = int(data.get("totalPages") or 1)
            logger.debug(f"Fetched collections page {page}/{total_pages}")
            if page >= total_pages or not data["items"]:
                break
            page += 1

        logger.info(f"Fetched {len(items)} collections")
        return items

    def get_collections(self, include_system: bool = False) -> list[CollectionSchema]:
        """Fetch and parse collection schemas.

        Args:
            include_system: Keep collections the server marks as system ones.
        """
        try:
            collections = parse_collections(self.fetch_collections())
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PocketBaseError(f"Malformed collection payload: {e}") from e

        if not include_system:
            skipped = [c.name for c in collections if c.system]
            if skipped:
                logger.debug(f"Skipping system collections: {', '.join(skipped)}")
            collections = [c for c in collections if not c.system]
        return collections
