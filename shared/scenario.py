"""
Declarative scenarios and the runner that executes them.

A scenario names its preconditions (users to seed, who to log in as), a
list of action steps and a list of check steps. The runner gives every
scenario a fresh browser context and re-runs the full setup (reset, seed,
navigate, optional login) before each one, so no scenario can observe
state left behind by another.

Outcomes:
    PASSED  - every action and check completed.
    FAILED  - a check or UI interaction failed or timed out; later
              scenarios still run.
    ERROR   - the backend could not be reset or seeded (``SeedError``).
              Fatal to the scenario and never retried.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from playwright.sync_api import Browser, Error as PlaywrightError, Page

from shared.assertions import expect_text_visible
from shared.seed import SeedError, SeedUser, TestingApiClient
from shared.session import Session

logger = logging.getLogger(__name__)

Step = Callable[["ScenarioContext"], None]
LoginAction = Callable[[Page, str, str], None]


@dataclass
class ScenarioContext:
    """Everything a step may touch while its scenario runs."""

    page: Page
    api: TestingApiClient
    frontend_url: str
    users: dict[str, SeedUser]
    session: Session = field(default_factory=Session)

    def user(self, username: str) -> SeedUser:
        try:
            return self.users[username]
        except KeyError:
            raise KeyError(f"User {username!r} was not seeded for this scenario") from None


@dataclass
class Scenario:
    """
    One independent test case.

    Attributes:
        name: Human-readable scenario name.
        actions: Steps run in order after setup.
        checks: Steps run in order after all actions; each asserts something.
        users: Users seeded through the API before the page is opened.
        login_as: Username to log in through the UI during setup.
        tags: Free-form labels, e.g. ``("smoke",)``.
    """

    name: str
    actions: list[Step] = field(default_factory=list)
    checks: list[Step] = field(default_factory=list)
    users: list[SeedUser] = field(default_factory=list)
    login_as: str | None = None
    tags: tuple[str, ...] = ()


class Outcome(str, Enum):
    """Result classification for a scenario run."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class ScenarioResult:
    """Outcome of one scenario, with the failing phase when it did not pass."""

    name: str
    outcome: Outcome
    phase: str | None = None
    message: str | None = None
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED


def on_page(action: Callable[..., Any], *args: Any, **kwargs: Any) -> Step:
    """Turn ``action(page, *args, **kwargs)`` into a scenario step."""

    def _step(context: ScenarioContext) -> None:
        action(context.page, *args, **kwargs)

    _step.__name__ = getattr(action, "__name__", "step")
    return _step


class ScenarioRunner:
    """
    Executes scenarios sequentially against one shared backend.

    Args:
        browser: Playwright browser; each scenario gets a new context.
        api: Client used to reset and seed the backend.
        frontend_url: URL opened at the end of setup.
        login_action: ``login(page, username, password)`` used for
            ``Scenario.login_as``.
        context_args: Keyword arguments for ``browser.new_context``.
    """

    def __init__(
        self,
        browser: Browser,
        api: TestingApiClient,
        frontend_url: str,
        login_action: LoginAction | None = None,
        context_args: dict[str, Any] | None = None,
    ):
        self.browser = browser
        self.api = api
        self.frontend_url = frontend_url
        self.login_action = login_action
        self.context_args = context_args or {}

    def setup(self, scenario: Scenario, page: Page) -> ScenarioContext:
        """
        Reset and seed the backend, open the app, and log in if requested.

        Raises:
            SeedError: If the backend rejects the reset or a fixture.
        """
        self.api.reset()
        self.api.seed_users(scenario.users)
        page.goto(self.frontend_url)

        context = ScenarioContext(
            page=page,
            api=self.api,
            frontend_url=self.frontend_url,
            users={user.username: user for user in scenario.users},
        )

        if scenario.login_as is not None:
            if self.login_action is None:
                raise ValueError(f"Scenario {scenario.name!r} needs a login action to log in")
            user = context.user(scenario.login_as)
            self.login_action(page, user.username, user.password)
            expect_text_visible(page, f"{user.name} logged in")
            context.session.login(user, succeeded=True)
        return context

    def run(self, scenario: Scenario) -> ScenarioResult:
        """Run one scenario in its own browser context and classify the outcome."""
        logger.info("Running scenario: %s", scenario.name)
        browser_context = self.browser.new_context(**self.context_args)
        started = time.monotonic()
        phase = "setup"
        try:
            page = browser_context.new_page()
            context = self.setup(scenario, page)

            phase = "actions"
            for action in scenario.actions:
                action(context)

            phase = "checks"
            for check in scenario.checks:
                check(context)
        except (AssertionError, PlaywrightError) as exc:
            logger.warning("Scenario %s failed during %s: %s", scenario.name, phase, exc)
            return ScenarioResult(
                name=scenario.name,
                outcome=Outcome.FAILED,
                phase=phase,
                message=str(exc),
                duration=time.monotonic() - started,
            )
        finally:
            browser_context.close()

        logger.info("Scenario passed: %s", scenario.name)
        return ScenarioResult(
            name=scenario.name,
            outcome=Outcome.PASSED,
            duration=time.monotonic() - started,
        )

    def run_all(self, scenarios: Iterable[Scenario]) -> list[ScenarioResult]:
        """Run scenarios one after another; a failure never stops the rest."""
        results = []
        for scenario in scenarios:
            try:
                results.append(self.run(scenario))
            except SeedError as exc:
                logger.error("Scenario %s aborted, setup failed: %s", scenario.name, exc)
                results.append(
                    ScenarioResult(
                        name=scenario.name,
                        outcome=Outcome.ERROR,
                        phase="setup",
                        message=str(exc),
                    )
                )
        return results
