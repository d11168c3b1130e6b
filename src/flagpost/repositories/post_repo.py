"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from flagpost.models import Comment, Post, User

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def list_with_authors(self) -> list[tuple[Post, str | None, str | None, int]]:
        """Return ``(post, pseudonym, name, reply_count)`` rows, newest first."""
        reply_counts = (
            select(Comment.post_id, func.count(Comment.id).label("reply_count"))
            .group_by(Comment.post_id)
            .subquery()
        )
        stmt = (
            select(
                Post,
                User.pseudonym,
                User.name,
                func.coalesce(reply_counts.c.reply_count, 0),
            )
            .outerjoin(User, User.id == Post.author_id)
            .outerjoin(reply_counts, reply_counts.c.post_id == Post.id)
            .order_by(desc(Post.created_at), desc(Post.id))
        )
        return [tuple(row) for row in self.session.execute(stmt).all()]  # type: ignore[misc]

    def create(
        self,
        *,
        author_id: int,
        content: str,
        age: int | None,
        city: str | None,
        media_ref: str | None,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(
            author_id=author_id,
            content=content,
            age=age,
            city=city,
            media_ref=media_ref,
            green_flags=0,
            red_flags=0,
        )
        self.session.add(post)
        self.session.flush()
        return post

    def list_comments(self, post_id: int) -> list[Comment]:
        """Return replies to a post in the order they were written."""
        return (
            self.session.query(Comment)
            .filter(Comment.post_id == post_id)
            .order_by(Comment.created_at, Comment.id)
            .all()
        )

    def add_comment(self, *, post_id: int, author_id: int, content: str) -> Comment:
        """Insert a reply and return it."""
        comment = Comment(post_id=post_id, author_id=author_id, content=content)
        self.session.add(comment)
        self.session.flush()
        return comment
