"""
Flask application factory for the reference blog application.

The browser suite needs a running frontend and REST backend. This package
provides both from one Flask app: the JSON API under ``/api`` and a
single-page UI at ``/``. It is only a stand-in for the real application;
the test harness never imports it and talks to it over HTTP.
"""

import logging
import os
from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating blog app with config: %s", config_class.__name__)

    # Ensure instance folder exists for the SQLite database file
    os.makedirs(app.instance_path, exist_ok=True)

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from app.routes.api import api_bp
    from app.routes.testing import testing_bp
    from app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    if app.config.get("ENABLE_TESTING_ROUTES"):
        app.register_blueprint(testing_bp, url_prefix="/api/testing")
        logger.info("Testing routes enabled at /api/testing")
    app.register_blueprint(views_bp)

    # Create database tables
    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
