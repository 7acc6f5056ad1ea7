"""
Authentication state of one browser context.

The UI is either logged out or logged in as exactly one user:

    LOGGED_OUT --login(valid)----> LOGGED_IN(user)
    LOGGED_OUT --login(invalid)--> LOGGED_OUT   (error banner shown)
    LOGGED_IN  --logout----------> LOGGED_OUT

Every session starts logged out and is discarded with its browser context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shared.seed import SeedUser


class AuthState(str, Enum):
    """Authentication states observable in the UI."""

    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class InvalidTransition(RuntimeError):
    """Raised when an action is not allowed in the current state."""


@dataclass
class Session:
    """Tracks which user, if any, a browser context is logged in as."""

    state: AuthState = AuthState.LOGGED_OUT
    user: SeedUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.LOGGED_IN

    def login(self, user: SeedUser, succeeded: bool) -> None:
        """
        Record the outcome of a login attempt.

        Args:
            user: Credentials that were submitted.
            succeeded: Whether the UI showed the "<name> logged in" text.

        Raises:
            InvalidTransition: If the session is already logged in.
        """
        if self.is_authenticated:
            raise InvalidTransition(
                f"Cannot log in as {user.username}: already logged in as {self.user.username}"
            )
        if succeeded:
            self.state = AuthState.LOGGED_IN
            self.user = user

    def logout(self) -> None:
        """Return to LOGGED_OUT. Raises InvalidTransition when not logged in."""
        if not self.is_authenticated:
            raise InvalidTransition("Cannot log out: no user is logged in")
        self.state = AuthState.LOGGED_OUT
        self.user = None

    def expected_banner(self) -> str | None:
        """Text the UI shows for the current user, or None when logged out."""
        if self.user is None:
            return None
        return f"{self.user.name} logged in"
