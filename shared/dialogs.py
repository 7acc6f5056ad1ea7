"""Handling of native browser dialogs raised by UI actions."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Dialog, Page

from shared.assertions import current_timeout_ms

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 50


class DialogError(AssertionError):
    """Raised when the expected dialog never appears or has the wrong type."""


@contextmanager
def expect_dialog(
    page: Page,
    expected_type: str = "confirm",
    accept: bool = True,
    timeout_ms: int | None = None,
) -> Iterator[list[str]]:
    """
    Handle exactly one dialog triggered by the action inside the block.

    The handler is registered before the block runs, so a dialog opened
    synchronously by a click is never missed. After the block, waits up to
    ``timeout_ms`` for the dialog and checks its type.

    Usage::

        with expect_dialog(page):
            page.get_by_role("button", name="remove").click()

    Args:
        page: Page that will raise the dialog.
        expected_type: ``"confirm"``, ``"alert"``, ``"prompt"`` or
            ``"beforeunload"``.
        accept: Accept the dialog when True, dismiss it otherwise.
        timeout_ms: How long to wait for the dialog after the action.
            Defaults to the configured assertion ceiling.

    Yields:
        List that receives the type of each handled dialog.

    Raises:
        DialogError: If no dialog appeared or its type was unexpected.
    """
    if timeout_ms is None:
        timeout_ms = current_timeout_ms()
    seen: list[str] = []

    def _handle(dialog: Dialog) -> None:
        seen.append(dialog.type)
        logger.info("Handling %s dialog: %s", dialog.type, dialog.message)
        if accept:
            dialog.accept()
        else:
            dialog.dismiss()

    page.once("dialog", _handle)
    try:
        yield seen
    except BaseException:
        page.remove_listener("dialog", _handle)
        raise

    deadline = time.monotonic() + timeout_ms / 1000
    while not seen and time.monotonic() < deadline:
        page.wait_for_timeout(POLL_INTERVAL_MS)

    if not seen:
        page.remove_listener("dialog", _handle)
        raise DialogError(f"Expected a {expected_type} dialog within {timeout_ms} ms, none appeared")
    if seen[0] != expected_type:
        raise DialogError(f"Expected a {expected_type} dialog, got {seen[0]}")
