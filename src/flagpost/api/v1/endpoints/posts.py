"""Post-related endpoints for the flagpost API."""

from __future__ import annotations

from fastapi import APIRouter, status

from flagpost.api.v1.dependencies import IdentityDep, SessionDep, StorageDep
from flagpost.models import Comment, Post
from flagpost.schemas.post import (
    CommentCreate,
    CommentResponse,
    FeedItem,
    PostCreate,
    PostResponse,
)
from flagpost.services import post_service
from flagpost.services.feed import assemble_feed

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[FeedItem])
async def list_feed(db: SessionDep) -> list[FeedItem]:
    """Return all posts newest first with author label and reply count."""
    return [
        FeedItem(
            **PostResponse.model_validate(entry.post).model_dump(),
            author_label=entry.author_label,
            reply_count=entry.reply_count,
        )
        for entry in assemble_feed(db)
    ]


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    identity: IdentityDep,
    db: SessionDep,
    storage: StorageDep,
) -> Post:
    """Create a post; attached media must already be uploaded to storage."""
    return await post_service.create_post(
        db=db,
        storage=storage,
        author_external_id=identity,
        content=post_data.content,
        age=post_data.age,
        city=post_data.city,
        media_ref=post_data.media_ref,
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep) -> Post:
    """Get a specific post by ID."""
    return post_service.get_post(db, post_id)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: SessionDep) -> list[Comment]:
    """Get replies to a post in the order they were written."""
    return post_service.list_comments(db, post_id)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: int,
    comment_data: CommentCreate,
    identity: IdentityDep,
    db: SessionDep,
) -> Comment:
    """Reply to a post."""
    return post_service.add_comment(
        db, post_id=post_id, author_external_id=identity, content=comment_data.content
    )
