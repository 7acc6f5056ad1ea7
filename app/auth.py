"""
Token issuing and verification for the reference blog application.

Login hands out an HS256-signed JWT; write endpoints require it as a
``Bearer`` token and read the caller's identity from ``flask.g``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any

import jwt
from flask import Response, current_app, g, jsonify, request

ALGORITHM = "HS256"
REQUIRED_TOKEN_CLAIMS = ["user_id", "username", "iat", "exp"]


def create_token(user_id: int, username: str, secret: str, expiry_hours: int) -> str:
    """
    Create a signed token carrying the user's identity.

    Args:
        user_id: Primary key of the authenticated user.
        username: Login name of the user.
        secret: Shared signing secret.
        expiry_hours: Hours until the token expires.

    Returns:
        Compact JWS string for the ``Authorization`` header.

    Raises:
        ValueError: If *user_id* is not positive or *username* is blank.
    """
    if int(user_id) <= 0:
        raise ValueError("user_id must be a positive integer")
    if not isinstance(username, str) or not username.strip():
        raise ValueError("username must be a non-empty string")

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "user_id": int(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=int(expiry_hours))).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> dict[str, Any] | None:
    """
    Decode and validate a token, returning the payload or ``None``.

    Args:
        token: Encoded JWT string.
        secret: Shared signing secret.

    Returns:
        The decoded payload, or ``None`` if the token is invalid, expired,
        or missing identity claims.
    """
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_TOKEN_CLAIMS},
        )
    except jwt.InvalidTokenError:
        return None

    if not isinstance(decoded.get("user_id"), int) or decoded["user_id"] <= 0:
        return None
    return decoded


def require_auth(view_func: Callable[..., tuple[Response, int] | Response]):
    """
    Decorator that enforces Bearer-token authentication.

    On success ``g.user_id`` and ``g.username`` hold the caller's identity;
    otherwise the request is answered with ``401`` before the view runs.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": "token missing or invalid"}), 401

        payload = verify_token(auth_header[7:].strip(), current_app.config["SECRET_KEY"])
        if payload is None:
            return jsonify({"error": "token missing or invalid"}), 401

        g.user_id = payload["user_id"]
        g.username = payload["username"]
        return view_func(*args, **kwargs)

    return wrapper
