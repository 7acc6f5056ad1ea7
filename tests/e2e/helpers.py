"""
Action helpers shared by the blog E2E tests and scenarios.

Each helper performs one multi-step user interaction through the UI.
They take the Playwright page as their first argument so they can be
bound into scenario steps with :func:`shared.scenario.on_page`.
"""

from __future__ import annotations

from playwright.sync_api import Page

from tests.e2e.pages.blog_list_page import BlogListPage
from tests.e2e.pages.login_page import LoginPage


def login_with(page: Page, username: str, password: str) -> None:
    """
    Submit credentials through the login form.

    There is no return value and no exception on bad credentials: success
    shows "<name> logged in", failure shows "Wrong credentials".

    Args:
        page: Playwright page showing the login form.
        username: Username to enter.
        password: Password to enter.
    """
    LoginPage(page).login(username, password)


def create_new_blog(page: Page, title: str, author: str = "", url: str = "") -> None:
    """
    Create a post through the form and wait for it to render.

    The session must already be logged in.
    """
    BlogListPage(page).create_blog(title, author, url)


def like_blog(page: Page, title: str, times: int = 1) -> None:
    """Expand a post and like it ``times`` times."""
    BlogListPage(page).like(title, times)


def remove_blog(page: Page, title: str) -> None:
    """Expand a post, click remove and accept the confirmation dialog."""
    BlogListPage(page).remove(title)


def view_blog(page: Page, title: str) -> None:
    """Expand a post's details."""
    BlogListPage(page).view(title)


def logout(page: Page) -> None:
    """Log out and wait for the login form."""
    LoginPage(page).logout()
