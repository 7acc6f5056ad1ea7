"""
Shared pytest fixtures for the blog test suite.

The unit and integration tests run against the reference application via
Flask's test client; the browser suite under ``tests/e2e`` has its own
fixtures and only needs a live server.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
"""

import os
import pytest
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app, db
from app.auth import create_token
from app.models import Blog, User


# Initialize Faker for generating test data
fake = Faker()

DEFAULT_PASSWORD = "sekret"


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app, db_session):
    """
    Create a test client backed by a fresh database.

    Args:
        app: Flask application fixture.
        db_session: Ensures empty tables for each test.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Tables are created before the test and dropped afterwards so no test
    sees rows written by another.

    Yields:
        The Flask-SQLAlchemy extension, bound to an app context.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(db_session):
    """
    Factory fixture for creating User rows directly in the database.

    Example:
        def test_something(user_factory):
            user = user_factory(username="mluukkai")
            assert user.id is not None
    """

    def _create_user(**kwargs: Any) -> User:
        password = kwargs.pop("password", DEFAULT_PASSWORD)
        user = User(
            username=kwargs.pop("username", fake.unique.user_name()),
            name=kwargs.pop("name", fake.name()),
        )
        user.set_password(password)
        db_session.session.add(user)
        db_session.session.commit()
        return user

    return _create_user


@pytest.fixture
def blog_factory(db_session, user_factory):
    """Factory fixture for creating Blog rows; creates an owner when none is given."""

    def _create_blog(**kwargs: Any) -> Blog:
        owner = kwargs.pop("user", None) or user_factory()
        blog = Blog(
            title=kwargs.pop("title", fake.sentence(nb_words=4)),
            author=kwargs.pop("author", fake.name()),
            url=kwargs.pop("url", fake.url()),
            likes=kwargs.pop("likes", 0),
            user=owner,
        )
        db_session.session.add(blog)
        db_session.session.commit()
        return blog

    return _create_blog


@pytest.fixture
def auth_headers(app):
    """Return a function building ``Authorization`` headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_token(
            user_id=user.id,
            username=user.username,
            secret=app.config["SECRET_KEY"],
            expiry_hours=app.config["TOKEN_EXPIRY_HOURS"],
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def sample_user_data() -> dict[str, str]:
    """Valid payload for ``POST /api/users``."""
    return {
        "username": fake.unique.user_name(),
        "name": fake.name(),
        "password": DEFAULT_PASSWORD,
    }
