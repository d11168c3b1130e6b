# tests/v1/test_votes.py
"""Tests for vote-related endpoints."""

from fastapi import status

from tests.conftest import auth_headers


def test_cast_green_flag(client, make_user, test_post) -> None:
    make_user("user_voter")
    response = client.post(
        "/api/v1/votes/",
        json={"post_id": test_post.id, "vote": "green"},
        headers=auth_headers("user_voter"),
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {
        "post_id": test_post.id,
        "green_flags": 1,
        "red_flags": 0,
        "my_vote": "green",
    }


def test_swap_and_retract(client, make_user, test_post) -> None:
    make_user("user_voter")
    headers = auth_headers("user_voter")

    client.post("/api/v1/votes/", json={"post_id": test_post.id, "vote": "green"}, headers=headers)
    swapped = client.post(
        "/api/v1/votes/", json={"post_id": test_post.id, "vote": "red"}, headers=headers
    ).json()
    assert (swapped["green_flags"], swapped["red_flags"]) == (0, 1)

    my_vote = client.get(f"/api/v1/votes/{test_post.id}/my-vote", headers=headers)
    assert my_vote.json() == {"vote": "red"}

    retracted = client.post(
        "/api/v1/votes/", json={"post_id": test_post.id, "vote": "none"}, headers=headers
    ).json()
    assert (retracted["green_flags"], retracted["red_flags"]) == (0, 0)


def test_invalid_vote_value(client, make_user, test_post) -> None:
    make_user("user_voter")
    response = client.post(
        "/api/v1/votes/",
        json={"post_id": test_post.id, "vote": "purple"},
        headers=auth_headers("user_voter"),
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_vote_nonexistent_post(client, make_user) -> None:
    make_user("user_voter")
    response = client.post(
        "/api/v1/votes/",
        json={"post_id": 99999, "vote": "red"},
        headers=auth_headers("user_voter"),
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_vote_without_account_record(client, test_post) -> None:
    response = client.post(
        "/api/v1/votes/",
        json={"post_id": test_post.id, "vote": "green"},
        headers=auth_headers("user_unknown"),
    )
    assert response.status_code == status.HTTP_409_CONFLICT
