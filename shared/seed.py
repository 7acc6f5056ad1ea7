"""
State reset and seeding through the application's REST API.

Scenarios establish their preconditions here rather than through the UI:
direct API calls are faster and free of rendering delays. Every failure
is fatal to the calling scenario and is never retried.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)


class SeedError(RuntimeError):
    """Raised when the backend cannot be reset or refuses fixture data."""


@dataclass(frozen=True)
class SeedUser:
    """A user fixture as sent to ``POST /api/users``."""

    username: str
    name: str
    password: str

    def as_payload(self) -> dict[str, str]:
        return asdict(self)


class TestingApiClient:
    """
    Thin client for the reset/seed boundary of the blog backend.

    Args:
        backend_url: Root URL of the backend, without the ``/api`` suffix.
        timeout: Per-request timeout in seconds.
        session: Optional ``requests.Session`` to reuse.
    """

    # Not a test class, despite the name.
    __test__ = False

    def __init__(
        self,
        backend_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ):
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> requests.Response:
        url = f"{self.backend_url}/api{path}"
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            response = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("POST %s failed: %s", url, exc)
            raise SeedError(f"POST {url} failed: {exc}") from exc

        if not response.ok:
            logger.error("POST %s rejected with %s: %s", url, response.status_code, response.text)
            raise SeedError(f"POST {url} returned {response.status_code}: {response.text}")
        return response

    @staticmethod
    def _decode(response: requests.Response, empty: Any) -> Any:
        """Parse a JSON body; an empty body yields ``empty``."""
        if not response.content:
            return empty
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Non-JSON body from %s: %r", response.url, response.text[:200])
            raise SeedError(f"{response.url} answered with a non-JSON body") from exc

    def reset(self) -> None:
        """Delete every user and blog post. Safe to call repeatedly."""
        self._post("/testing/reset")
        logger.info("Backend state reset at %s", self.backend_url)

    def create_user(self, fields: SeedUser | dict[str, str]) -> dict[str, Any]:
        """
        Insert a user directly through the API.

        Args:
            fields: A :class:`SeedUser` or a dict with ``username``, ``name``
                and ``password``.

        Returns:
            The user record returned by the backend.
        """
        payload = fields.as_payload() if isinstance(fields, SeedUser) else dict(fields)
        response = self._post("/users", payload)
        logger.info("Seeded user %s", payload.get("username"))
        return self._decode(response, {})

    def login(self, username: str, password: str) -> str:
        """Return an API token for the given credentials."""
        response = self._post("/login", {"username": username, "password": password})
        try:
            return response.json()["token"]
        except (ValueError, KeyError) as exc:
            raise SeedError(f"Login response for {username} carried no token") from exc

    def create_blog(
        self,
        token: str,
        title: str,
        author: str = "",
        url: str = "",
        likes: int = 0,
    ) -> dict[str, Any]:
        """Create a blog post owned by the token's user, bypassing the UI."""
        response = self._post(
            "/blogs",
            {"title": title, "author": author, "url": url, "likes": likes},
            token=token,
        )
        logger.info("Seeded blog %r", title)
        return self._decode(response, {})

    def list_blogs(self) -> list[dict[str, Any]]:
        """Return every blog post as stored by the backend."""
        url = f"{self.backend_url}/api/blogs"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SeedError(f"GET {url} failed: {exc}") from exc
        return self._decode(response, [])

    def seed_users(self, users: list[SeedUser]) -> list[dict[str, Any]]:
        """Create several users in order."""
        return [self.create_user(user) for user in users]
