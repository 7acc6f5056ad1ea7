"""
HTML view routes for the reference blog application.

The UI is a single page that renders itself from the JSON API, so the
only server-side route serves that page.

Routes:
    GET  /  - Blog single-page application
"""

import logging

from flask import Blueprint, current_app, render_template

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


@views_bp.route("/")
def index():
    """Render the blog page with the API base URL the script should call."""
    logger.info("GET / - Rendering blog page")
    return render_template("index.html", api_base=current_app.config["API_BASE_URL"])
