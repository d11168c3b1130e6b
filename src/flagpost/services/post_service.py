"""Service-level helpers for creating posts and replies."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from flagpost.core.errors import NotFound, PreconditionFailed
from flagpost.models import Comment, Post, User
from flagpost.repositories.post_repo import PostRepository
from flagpost.services.storage import StorageClient

logger = logging.getLogger(__name__)


def _require_author(db: Session, external_id: str) -> User:
    author = db.query(User).filter(User.external_id == external_id).first()
    if author is None:
        raise PreconditionFailed(f"No account record for {external_id}")
    return author


def get_post(db: Session, post_id: int) -> Post:
    """Return a post or raise :class:`NotFound`."""
    post = PostRepository(db).get_by_id(post_id)
    if post is None:
        raise NotFound(f"Post {post_id} not found")
    return post


async def create_post(
    *,
    db: Session,
    storage: StorageClient,
    author_external_id: str,
    content: str,
    age: int | None = None,
    city: str | None = None,
    media_ref: str | None = None,
) -> Post:
    """Create a post for an approved member.

    Args:
        db: Session used to persist the post.
        storage: Client used to confirm attached media exists.
        author_external_id: Identity provider id of the author.
        content: Story text; may be empty only when media is attached.
        age: Optional age of the poster.
        city: Optional city of the poster.
        media_ref: Optional storage id of an uploaded attachment.

    Returns:
        The persisted post.

    Raises:
        PreconditionFailed: If the author has no record or is not approved.
        ValueError: If neither text nor media is provided.
        UpstreamIntegrationFailure: If the attachment is missing in storage.
            Nothing is written in that case.
    """
    content = content.strip()
    if not content and not media_ref:
        raise ValueError("A post needs text or an attachment")

    author = _require_author(db, author_external_id)
    if not author.is_approved:
        raise PreconditionFailed("Only approved members can post")

    if media_ref:
        await storage.ensure_exists(media_ref)

    post = PostRepository(db).create(
        author_id=author.id,
        content=content,
        age=age,
        city=city.strip() if city else None,
        media_ref=media_ref,
    )
    db.commit()
    db.refresh(post)
    logger.info("User %s created post %s", author.id, post.id)
    return post


def add_comment(db: Session, *, post_id: int, author_external_id: str, content: str) -> Comment:
    """Attach a reply to an existing post."""
    author = _require_author(db, author_external_id)
    get_post(db, post_id)
    comment = PostRepository(db).add_comment(
        post_id=post_id, author_id=author.id, content=content.strip()
    )
    db.commit()
    db.refresh(comment)
    return comment


def list_comments(db: Session, post_id: int) -> list[Comment]:
    """Return replies to an existing post."""
    get_post(db, post_id)
    return PostRepository(db).list_comments(post_id)
