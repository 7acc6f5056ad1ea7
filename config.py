"""
Application configuration module.

This module defines configuration classes for the reference blog
application (development, testing, e2e, production). Configuration values
are loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Default database location
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'blogs.db'}"
    )

    # Exposes POST /api/testing/reset when True
    ENABLE_TESTING_ROUTES: bool = False

    # Base URL the frontend uses for API calls; empty means same origin
    API_BASE_URL: str = os.environ.get("BLOG_API_BASE_URL", "")

    MIN_FIELD_LENGTH: int = 3
    TOKEN_EXPIRY_HOURS: int = int(os.environ.get("TOKEN_EXPIRY_HOURS", "1"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False
    ENABLE_TESTING_ROUTES: bool = True


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True
    ENABLE_TESTING_ROUTES: bool = True

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'test_blogs.db'}"
    )


class E2EConfig(TestingConfig):
    """Configuration for the in-process server driven by the browser suite."""

    # Separate file so integration tests dropping tables never touch it.
    # check_same_thread=False because the server runs on a background thread.
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "E2E_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'e2e_blogs.db'}?check_same_thread=False"
    )

    SQLALCHEMY_ENGINE_OPTIONS: dict = {
        "pool_pre_ping": True,
    }


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "e2e": E2EConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, e2e, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
