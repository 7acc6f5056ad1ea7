"""
Test-support endpoints, registered only when ENABLE_TESTING_ROUTES is set.

Routes:
    POST /api/testing/reset - Delete every blog and user
"""

import logging

from flask import Blueprint
from sqlalchemy import delete

from app import db
from app.models import Blog, User

logger = logging.getLogger(__name__)

testing_bp = Blueprint("testing", __name__)


@testing_bp.route("/reset", methods=["POST"])
def reset() -> tuple[str, int]:
    """Clear all persisted state. Calling it on an empty database is a no-op."""
    db.session.execute(delete(Blog))
    db.session.execute(delete(User))
    db.session.commit()
    logger.info("Testing reset: all blogs and users deleted")
    return "", 204
