"""Live-stack helpers: find a running blog app, or start the reference one."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Generator

import requests

from shared.settings import HarnessSettings

logger = logging.getLogger(__name__)


def is_up(url: str, timeout: float = 2) -> bool:
    """Return True when ``url`` answers with anything but a server error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def is_stack_ready(frontend_url: str, backend_url: str, timeout: float = 2) -> bool:
    """Return True when both tiers respond."""
    return is_up(frontend_url, timeout) and is_up(f"{backend_url}/api/blogs", timeout)


def wait_for_url(url: str, timeout: int = 60, interval: float = 1) -> None:
    """Poll ``url`` until it responds or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_up(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"{url} not reachable after {timeout}s")


def start_reference_app(host: str = "127.0.0.1", port: int = 0):
    """
    Serve the bundled reference blog app from a background thread.

    Args:
        host: Interface to bind.
        port: Port to bind; 0 lets the OS pick a free one.

    Returns:
        Tuple of (server, base_url). Call ``server.shutdown()`` to stop it.
    """
    from werkzeug.serving import make_server

    from app import create_app

    application = create_app("e2e")
    server = make_server(host, port, application, threaded=True)
    base_url = f"http://{host}:{server.server_port}"

    thread = threading.Thread(target=server.serve_forever, name="reference-blog-app", daemon=True)
    thread.start()
    logger.info("Reference blog app serving at %s", base_url)
    return server, base_url


def live_stack_urls(settings: HarnessSettings) -> Generator[tuple[str, str], None, None]:
    """
    Yield ``(frontend_url, backend_url)`` for a reachable blog app.

    Priority:
    1. URLs from the environment (``settings.external``): wait for both tiers.
    2. An app already listening on the default URLs.
    3. The reference app, started in-process and stopped on exit.
    """
    if settings.external:
        wait_for_url(settings.frontend_url)
        wait_for_url(f"{settings.backend_url}/api/blogs")
        yield settings.frontend_url, settings.backend_url
        return

    if is_stack_ready(settings.frontend_url, settings.backend_url):
        logger.info("Reusing running stack at %s / %s", settings.frontend_url, settings.backend_url)
        yield settings.frontend_url, settings.backend_url
        return

    server, base_url = start_reference_app(settings.server_host, settings.server_port)
    try:
        wait_for_url(f"{base_url}/api/health", timeout=10, interval=0.1)
        yield base_url, base_url
    finally:
        server.shutdown()
        logger.info("Reference blog app stopped")
