"""Tests for feed assembly and post creation."""

import pytest

from flagpost.core.errors import PreconditionFailed, UpstreamIntegrationFailure
from flagpost.models import Comment, Post
from flagpost.models.user import VerificationStatus
from flagpost.services import post_service
from flagpost.services.feed import FALLBACK_AUTHOR_LABEL, assemble_feed, author_label


@pytest.mark.parametrize(
    ("pseudonym", "name", "expected"),
    [
        ("QuietOtter123", "Ada", "QuietOtter123"),
        ("", "Ada", "Ada"),
        (None, None, FALLBACK_AUTHOR_LABEL),
    ],
)
def test_author_label_fallbacks(pseudonym, name, expected) -> None:
    assert author_label(pseudonym, name) == expected


def test_feed_is_newest_first_with_reply_counts(db_session, approved_user, make_user) -> None:
    first = Post(author_id=approved_user.id, content="first")
    second = Post(author_id=approved_user.id, content="second")
    db_session.add_all([first, second])
    db_session.commit()
    replier = make_user()
    db_session.add_all(
        [
            Comment(post_id=first.id, author_id=replier.id, content="a"),
            Comment(post_id=first.id, author_id=replier.id, content="b"),
        ]
    )
    db_session.commit()

    feed = assemble_feed(db_session)

    assert [entry.post.id for entry in feed] == [second.id, first.id]
    assert [entry.reply_count for entry in feed] == [0, 2]
    assert feed[0].author_label == approved_user.pseudonym


def test_feed_reflects_profile_changes_on_read(db_session, approved_user, test_post) -> None:
    """Labels are joined at read time, so a renamed author shows up immediately."""
    approved_user.pseudonym = ""
    approved_user.name = ""
    db_session.commit()

    assert assemble_feed(db_session)[0].author_label == FALLBACK_AUTHOR_LABEL


def test_empty_feed(db_session) -> None:
    assert assemble_feed(db_session) == []


@pytest.mark.asyncio
async def test_create_post_with_media(db_session, storage_client, approved_user) -> None:
    post = await post_service.create_post(
        db=db_session,
        storage=storage_client,
        author_external_id=approved_user.external_id,
        content="  Brought his mum on the first date.  ",
        age=29,
        city=" Leeds ",
        media_ref="storage-media",
    )

    assert post.id is not None
    assert post.content == "Brought his mum on the first date."
    assert post.city == "Leeds"
    assert (post.green_flags, post.red_flags) == (0, 0)


@pytest.mark.asyncio
async def test_create_post_requires_approval(db_session, storage_client, make_user) -> None:
    pending = make_user(status=VerificationStatus.PENDING)

    with pytest.raises(PreconditionFailed):
        await post_service.create_post(
            db=db_session,
            storage=storage_client,
            author_external_id=pending.external_id,
            content="hello",
        )


@pytest.mark.asyncio
async def test_create_post_requires_text_or_media(db_session, storage_client, approved_user) -> None:
    with pytest.raises(ValueError):
        await post_service.create_post(
            db=db_session,
            storage=storage_client,
            author_external_id=approved_user.external_id,
            content="   ",
        )


@pytest.mark.asyncio
async def test_missing_media_writes_nothing(db_session, storage_client, approved_user) -> None:
    with pytest.raises(UpstreamIntegrationFailure):
        await post_service.create_post(
            db=db_session,
            storage=storage_client,
            author_external_id=approved_user.external_id,
            content="",
            media_ref="storage-unknown",
        )

    assert db_session.query(Post).count() == 0


def test_comments_round_trip(db_session, make_user, test_post) -> None:
    replier = make_user("user_replier")

    post_service.add_comment(
        db_session, post_id=test_post.id, author_external_id="user_replier", content=" one "
    )
    post_service.add_comment(
        db_session, post_id=test_post.id, author_external_id="user_replier", content="two"
    )

    comments = post_service.list_comments(db_session, test_post.id)
    assert [comment.content for comment in comments] == ["one", "two"]
    assert all(comment.author_id == replier.id for comment in comments)
