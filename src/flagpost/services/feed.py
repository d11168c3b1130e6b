"""Read-time feed assembly."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from flagpost.models import Post
from flagpost.repositories.post_repo import PostRepository

FALLBACK_AUTHOR_LABEL = "Anonymous"


@dataclass(frozen=True)
class FeedEntry:
    """A post with its author label and reply count."""

    post: Post
    author_label: str
    reply_count: int


def author_label(pseudonym: str | None, name: str | None) -> str:
    """Prefer the pseudonym, then the real name, then a placeholder."""
    return pseudonym or name or FALLBACK_AUTHOR_LABEL


def assemble_feed(db: Session) -> list[FeedEntry]:
    """Return every post newest first, joined on each read with no stored copy."""
    rows = PostRepository(db).list_with_authors()
    return [
        FeedEntry(post=post, author_label=author_label(pseudonym, name), reply_count=int(replies))
        for post, pseudonym, name, replies in rows
    ]
