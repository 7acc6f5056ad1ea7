"""Playwright fixtures for the blog app E2E tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest
from faker import Faker
from playwright.sync_api import Browser, BrowserContext, Page

from shared.assertions import configure_expect_timeout
from shared.live_stack import live_stack_urls
from shared.scenario import ScenarioRunner
from shared.seed import SeedUser, TestingApiClient
from shared.settings import HarnessSettings
from tests.e2e.helpers import login_with
from tests.e2e.pages.blog_list_page import BlogListPage
from tests.e2e.pages.login_page import LoginPage

fake = Faker()


@pytest.fixture(scope="session")
def harness_settings() -> HarnessSettings:
    return HarnessSettings.from_env()


@pytest.fixture(scope="session")
def live_stack(harness_settings: HarnessSettings) -> Generator[tuple[str, str], None, None]:
    """
    Return ``(frontend_url, backend_url)`` of a reachable blog app.

    If BLOG_FRONTEND_URL / BLOG_BACKEND_URL are set, use that stack.
    Otherwise reuse one on the default ports, or start the reference app.
    """
    yield from live_stack_urls(harness_settings)


@pytest.fixture(scope="session")
def frontend_url(live_stack: tuple[str, str]) -> str:
    return live_stack[0]


@pytest.fixture(scope="session")
def backend_url(live_stack: tuple[str, str]) -> str:
    return live_stack[1]


@pytest.fixture(scope="session")
def testing_api(backend_url: str) -> TestingApiClient:
    return TestingApiClient(backend_url)


@pytest.fixture(scope="session", autouse=True)
def assert_timeout(harness_settings: HarnessSettings) -> int:
    """Apply the assertion ceiling to every ``expect`` in the suite."""
    configure_expect_timeout(harness_settings.assert_timeout_ms)
    return harness_settings.assert_timeout_ms


@pytest.fixture(autouse=True)
def reset_backend(testing_api: TestingApiClient) -> None:
    """Clear all users and posts before every test; no test may rely on another's data."""
    testing_api.reset()


@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def seed_user(testing_api: TestingApiClient) -> Callable[..., SeedUser]:
    """Factory that creates a user through the API and returns its credentials."""

    def _seed(
        username: str | None = None,
        name: str | None = None,
        password: str = "1234",
    ) -> SeedUser:
        user = SeedUser(
            username=username or fake.unique.user_name(),
            name=name or fake.first_name(),
            password=password,
        )
        testing_api.create_user(user)
        return user

    return _seed


@pytest.fixture
def login_page(page: Page, frontend_url: str) -> LoginPage:
    return LoginPage(page, frontend_url).navigate()


@pytest.fixture
def blog_list_page(page: Page, frontend_url: str) -> BlogListPage:
    return BlogListPage(page, frontend_url)


@pytest.fixture
def logged_in_user(
    seed_user: Callable[..., SeedUser], login_page: LoginPage
) -> SeedUser:
    """Seed ``usertest`` and log it in through the UI in the current page."""
    user = seed_user(username="usertest", name="test1", password="1234")
    login_with(login_page.page, user.username, user.password)
    login_page.assert_logged_in_as(user.name)
    return user


@pytest.fixture
def scenario_runner(
    browser: Browser,
    testing_api: TestingApiClient,
    frontend_url: str,
    browser_context_args: dict,
) -> ScenarioRunner:
    return ScenarioRunner(
        browser=browser,
        api=testing_api,
        frontend_url=frontend_url,
        login_action=login_with,
        context_args=browser_context_args,
    )


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = "test-results/screenshots"
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
