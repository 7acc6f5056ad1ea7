"""
Database models for the reference blog application.

Two tables back the application: users, who log in and own posts, and
blogs, which carry the like counter the UI sorts by.
"""

from datetime import datetime, timezone
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from app import db


class User(db.Model):
    """
    A registered blog user.

    Attributes:
        id: Unique identifier for the user.
        username: Login name, unique across users.
        name: Display name shown as "<name> logged in".
        password_hash: Werkzeug hash of the password.
        blogs: Posts created by this user.
    """

    __tablename__ = "users"

    id: int = db.Column(db.Integer, primary_key=True)
    username: str = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name: str = db.Column(db.String(120), nullable=False, default="")
    password_hash: str = db.Column(db.String(256), nullable=False)

    blogs = db.relationship(
        "Blog",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def set_password(self, password: str) -> None:
        """Hash and store a plain-text password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Return True when ``password`` matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def to_dict(self, include_blogs: bool = False) -> dict[str, Any]:
        """
        Convert the user to a dictionary without the password hash.

        Args:
            include_blogs: Embed a short summary of each owned post.

        Returns:
            Dictionary with ``id``, ``username`` and ``name``.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "username": self.username,
            "name": self.name,
        }
        if include_blogs:
            data["blogs"] = [
                {"id": blog.id, "title": blog.title, "likes": blog.likes}
                for blog in self.blogs
            ]
        return data

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.username}>"


class Blog(db.Model):
    """
    A blog post listed on the front page.

    Attributes:
        id: Unique identifier for the post.
        title: Post title, rendered in the list.
        author: Free-text author credit.
        url: Link to the post.
        likes: Like counter; the UI orders posts by it, highest first.
        user_id: Owner of record; only the owner may delete the post.
        created_at: Timestamp when the post was created.
    """

    __tablename__ = "blogs"

    id: int = db.Column(db.Integer, primary_key=True)
    title: str = db.Column(db.String(200), nullable=False)
    author: str = db.Column(db.String(120), nullable=False, default="")
    url: str = db.Column(db.String(500), nullable=False, default="")
    likes: int = db.Column(db.Integer, nullable=False, default=0)
    user_id: int = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    user = db.relationship("User", back_populates="blogs")

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the post to a dictionary with its owner embedded.

        Returns:
            Dictionary containing all post fields.
        """
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
            "user": self.user.to_dict() if self.user else None,
        }

    def __repr__(self) -> str:
        return f"<Blog {self.id}: {self.title}>"
