"""
REST API endpoints for the reference blog application.

Endpoints:
    GET    /api/health         - Health check
    GET    /api/users          - List users with their posts
    POST   /api/users          - Create a user
    POST   /api/login          - Exchange credentials for a token
    GET    /api/blogs          - List all posts
    POST   /api/blogs          - Create a post (token required)
    PUT    /api/blogs/<id>     - Update a post, typically its like count
    DELETE /api/blogs/<id>     - Delete a post (owner only)
"""

import logging
import os
from typing import Any

from flask import Blueprint, Response, current_app, g, jsonify, request
from sqlalchemy import select

from app import db
from app.auth import create_token, require_auth
from app.models import Blog, User

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

UPDATABLE_BLOG_FIELDS = ("title", "author", "url", "likes")


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _json_error(message: str, status_code: int) -> tuple[Response, int]:
    """Build a ``{"error": ...}`` response with the given status code."""
    return jsonify({"error": message}), status_code


def validate_user_data(data: dict[str, Any], min_length: int) -> str | None:
    """
    Validate a user creation payload.

    Args:
        data: Parsed JSON body.
        min_length: Minimum length of ``username`` and ``password``.

    Returns:
        Error message for the first invalid field, or None when valid.
    """
    for field in ("username", "password"):
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            return f"'{field}' is required"
        if len(value) < min_length:
            return f"'{field}' must be at least {min_length} characters long"

    name = data.get("name", "")
    if not isinstance(name, str):
        return "'name' must be a string"
    return None


def validate_blog_data(data: dict[str, Any], partial: bool = False) -> str | None:
    """
    Validate a blog payload.

    Args:
        data: Parsed JSON body.
        partial: When True, ``title`` may be omitted (updates).

    Returns:
        Error message, or None when valid.
    """
    if not partial or "title" in data:
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            return "'title' is required"
        if len(title) > 200:
            return "Title must be 200 characters or less"

    for field in ("author", "url"):
        if field in data and not isinstance(data[field], str):
            return f"'{field}' must be a string"

    if "likes" in data:
        likes = data["likes"]
        if isinstance(likes, bool) or not isinstance(likes, int) or likes < 0:
            return "likes must be a non-negative integer"
    return None


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "service": "blogs",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
    }), 200


@api_bp.route("/users", methods=["GET"])
def list_users() -> tuple[Response, int]:
    """List all users, each with a summary of their posts."""
    users = db.session.scalars(select(User).order_by(User.id)).all()
    return jsonify([user.to_dict(include_blogs=True) for user in users]), 200


@api_bp.route("/users", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Create a new user.

    Request Body (JSON):
        username: Unique login name (required)
        name: Display name (optional)
        password: Plain-text password (required)

    Returns:
        JSON response with the created user and 201 status code,
        or error message and 400 if validation fails.
    """
    data = request.get_json(silent=True) or {}
    error = validate_user_data(data, current_app.config["MIN_FIELD_LENGTH"])
    if error:
        return _json_error(error, 400)

    username = data["username"].strip()
    existing = db.session.scalar(select(User).where(User.username == username))
    if existing:
        logger.warning("Rejected duplicate username %s", username)
        return _json_error("expected `username` to be unique", 400)

    user = User(username=username, name=data.get("name", "").strip())
    user.set_password(data["password"])
    db.session.add(user)
    db.session.commit()

    logger.info("Created user %s", user.username)
    return jsonify(user.to_dict()), 201


@api_bp.route("/login", methods=["POST"])
def login() -> tuple[Response, int]:
    """
    Authenticate a user and issue a token.

    Returns:
        200 with ``token``, ``username`` and ``name`` on success,
        401 when the username or password is wrong.
    """
    data = request.get_json(silent=True) or {}
    username = data.get("username")
    password = data.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        return _json_error("invalid username or password", 401)

    user = db.session.scalar(select(User).where(User.username == username.strip()))
    if not user or not user.check_password(password):
        logger.info("Failed login for %s", username)
        return _json_error("invalid username or password", 401)

    token = create_token(
        user_id=user.id,
        username=user.username,
        secret=current_app.config["SECRET_KEY"],
        expiry_hours=current_app.config["TOKEN_EXPIRY_HOURS"],
    )
    return jsonify({"token": token, "username": user.username, "name": user.name}), 200


@api_bp.route("/blogs", methods=["GET"])
def list_blogs() -> tuple[Response, int]:
    """List all posts in creation order; the UI does the sorting."""
    blogs = db.session.scalars(select(Blog).order_by(Blog.id)).all()
    return jsonify([blog.to_dict() for blog in blogs]), 200


@api_bp.route("/blogs", methods=["POST"])
@require_auth
def create_blog() -> tuple[Response, int]:
    """
    Create a post owned by the authenticated user.

    Request Body (JSON):
        title: Post title (required)
        author: Author credit (optional)
        url: Link (optional)
        likes: Initial like count (optional, default 0)
    """
    data = request.get_json(silent=True) or {}
    error = validate_blog_data(data)
    if error:
        return _json_error(error, 400)

    user = db.session.get(User, g.user_id)
    if user is None:
        return _json_error("token missing or invalid", 401)

    blog = Blog(
        title=data["title"].strip(),
        author=data.get("author", ""),
        url=data.get("url", ""),
        likes=data.get("likes", 0),
        user=user,
    )
    db.session.add(blog)
    db.session.commit()

    logger.info("User %s created blog %s", user.username, blog.id)
    return jsonify(blog.to_dict()), 201


@api_bp.route("/blogs/<int:blog_id>", methods=["PUT"])
def update_blog(blog_id: int) -> tuple[Response, int]:
    """Update a post's fields; the UI sends the incremented ``likes``."""
    blog = db.session.get(Blog, blog_id)
    if blog is None:
        return _json_error("Blog not found", 404)

    data = request.get_json(silent=True) or {}
    error = validate_blog_data(data, partial=True)
    if error:
        return _json_error(error, 400)

    for field in UPDATABLE_BLOG_FIELDS:
        if field in data:
            setattr(blog, field, data[field])
    db.session.commit()

    return jsonify(blog.to_dict()), 200


@api_bp.route("/blogs/<int:blog_id>", methods=["DELETE"])
@require_auth
def delete_blog(blog_id: int) -> tuple[Response, int] | tuple[str, int]:
    """
    Delete a post.

    Returns:
        204 on success, 403 when the caller does not own the post,
        404 when it does not exist.
    """
    blog = db.session.get(Blog, blog_id)
    if blog is None:
        return _json_error("Blog not found", 404)
    if blog.user_id != g.user_id:
        logger.warning("User %s may not delete blog %s", g.username, blog_id)
        return _json_error("only the creator can delete a blog", 403)

    db.session.delete(blog)
    db.session.commit()
    logger.info("Deleted blog %s", blog_id)
    return "", 204
