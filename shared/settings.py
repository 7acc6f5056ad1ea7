"""Environment-driven settings for the browser acceptance suite."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_FRONTEND_URL = "http://localhost:5173"
DEFAULT_BACKEND_URL = "http://localhost:3001"
DEFAULT_ASSERT_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class HarnessSettings:
    """
    Where the application under test lives and how long to wait for it.

    Attributes:
        frontend_url: Root URL the browser navigates to.
        backend_url: Root URL of the REST API used for reset and seeding.
        assert_timeout_ms: Ceiling for every UI assertion.
        external: True when the URLs came from the environment, meaning an
            already running stack must be used as-is.
        server_host: Bind address for the in-process reference app.
        server_port: Port for the in-process reference app (0 picks a free one).
    """

    frontend_url: str = DEFAULT_FRONTEND_URL
    backend_url: str = DEFAULT_BACKEND_URL
    assert_timeout_ms: int = DEFAULT_ASSERT_TIMEOUT_MS
    external: bool = False
    server_host: str = "127.0.0.1"
    server_port: int = 0

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "HarnessSettings":
        """
        Build settings from environment variables.

        ``BLOG_FRONTEND_URL`` and ``BLOG_BACKEND_URL`` select an external
        stack; if only one is given it is used for both tiers.
        """
        env = os.environ if environ is None else environ
        frontend = env.get("BLOG_FRONTEND_URL", "").rstrip("/")
        backend = env.get("BLOG_BACKEND_URL", "").rstrip("/")

        timeout_raw = env.get("BLOG_E2E_TIMEOUT_MS", str(DEFAULT_ASSERT_TIMEOUT_MS))
        try:
            timeout_ms = int(timeout_raw)
        except ValueError as exc:
            raise ValueError(f"BLOG_E2E_TIMEOUT_MS must be an integer, got {timeout_raw!r}") from exc
        if timeout_ms <= 0:
            raise ValueError("BLOG_E2E_TIMEOUT_MS must be positive")

        port_raw = env.get("BLOG_E2E_PORT", "0")
        try:
            server_port = int(port_raw)
        except ValueError as exc:
            raise ValueError(f"BLOG_E2E_PORT must be an integer, got {port_raw!r}") from exc
        if not 0 <= server_port <= 65535:
            raise ValueError(f"BLOG_E2E_PORT must be between 0 and 65535, got {server_port}")

        return cls(
            frontend_url=frontend or backend or DEFAULT_FRONTEND_URL,
            backend_url=backend or frontend or DEFAULT_BACKEND_URL,
            assert_timeout_ms=timeout_ms,
            external=bool(frontend or backend),
            server_host=env.get("BLOG_E2E_HOST", "127.0.0.1"),
            server_port=server_port,
        )
