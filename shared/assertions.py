"""
Assertion helpers for the blog acceptance suite.

UI checks go through Playwright's ``expect`` so each one retries until the
condition holds or the timeout ceiling is reached; a timed-out check raises
``AssertionError`` instead of hanging. The list-ordering helpers that work
on already-extracted values are plain functions so they can be tested
without a browser.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Union

from playwright.sync_api import Locator, Page, expect

from shared.settings import DEFAULT_ASSERT_TIMEOUT_MS

Scope = Union[Page, Locator]

_timeout_ms = DEFAULT_ASSERT_TIMEOUT_MS


def configure_expect_timeout(timeout_ms: int = DEFAULT_ASSERT_TIMEOUT_MS) -> None:
    """Set the default ceiling for every ``expect`` assertion and dialog wait."""
    global _timeout_ms
    _timeout_ms = timeout_ms
    expect.set_options(timeout=timeout_ms)


def current_timeout_ms() -> int:
    """The ceiling last set by :func:`configure_expect_timeout`."""
    return _timeout_ms


# -----------------------------------------------------------------------------
# Text and role visibility
# -----------------------------------------------------------------------------

def expect_text_visible(
    scope: Scope, text: str, exact: bool = False, timeout_ms: float | None = None
) -> None:
    """Wait until an element containing ``text`` is visible."""
    expect(scope.get_by_text(text, exact=exact)).to_be_visible(timeout=timeout_ms)


def expect_text_hidden(
    scope: Scope, text: str, exact: bool = False, timeout_ms: float | None = None
) -> None:
    """Wait until no visible element contains ``text``."""
    expect(scope.get_by_text(text, exact=exact)).not_to_be_visible(timeout=timeout_ms)


def expect_role_visible(
    scope: Scope, role: str, name: str, exact: bool = True, timeout_ms: float | None = None
) -> None:
    """Wait until an element with accessible ``role`` and ``name`` is visible."""
    expect(scope.get_by_role(role, name=name, exact=exact)).to_be_visible(timeout=timeout_ms)


def expect_role_hidden(
    scope: Scope, role: str, name: str, exact: bool = True, timeout_ms: float | None = None
) -> None:
    """Wait until no element with accessible ``role`` and ``name`` is visible."""
    expect(scope.get_by_role(role, name=name, exact=exact)).not_to_be_visible(timeout=timeout_ms)


# -----------------------------------------------------------------------------
# Rendered list ordering
# -----------------------------------------------------------------------------

def rendered_texts(items: Locator) -> list[str]:
    """Return the text content of every element ``items`` resolves to, in DOM order."""
    return items.all_text_contents()


def expect_titles_in_order(
    items: Locator, titles: Sequence[str], timeout_ms: float | None = None
) -> None:
    """
    Wait until the list holds exactly ``len(titles)`` items and item ``i``
    contains ``titles[i]``.
    """
    patterns = [re.compile(re.escape(title)) for title in titles]
    expect(items).to_have_text(patterns, timeout=timeout_ms)


def expect_titles_contain_in_order(
    items: Locator, titles: Sequence[str], timeout_ms: float | None = None
) -> None:
    """Wait until ``titles`` appear in the list in this relative order; other items may sit between."""
    expect(items).to_contain_text(list(titles), timeout=timeout_ms)


def assert_titles_at_positions(texts: Sequence[str], titles: Sequence[str]) -> None:
    """
    Check that ``texts[i]`` contains ``titles[i]`` for every expected title.

    Raises:
        AssertionError: Naming the first position that does not match.
    """
    if len(texts) < len(titles):
        raise AssertionError(
            f"Expected at least {len(titles)} rendered items, found {len(texts)}: {list(texts)}"
        )
    for position, title in enumerate(titles):
        if title not in texts[position]:
            raise AssertionError(
                f"Expected {title!r} at position {position}, found {texts[position]!r}"
            )


def is_non_increasing(values: Sequence[int]) -> bool:
    """True when every value is >= the one after it. Ties are allowed."""
    return all(current >= following for current, following in zip(values, values[1:]))


def assert_non_increasing_likes(likes: Sequence[int], titles: Sequence[str] | None = None) -> None:
    """
    Check that like counts, read top to bottom, never increase.

    Args:
        likes: Like counts in rendered order.
        titles: Matching titles, used only to make the failure readable.
    """
    if is_non_increasing(likes):
        return
    labels = list(titles) if titles is not None else [f"#{index}" for index in range(len(likes))]
    rendered = ", ".join(f"{label}={count}" for label, count in zip(labels, likes))
    raise AssertionError(f"Blogs are not ordered by likes (highest first): {rendered}")
