# tests/v1/test_users.py
"""Tests for onboarding and verification endpoints."""

from fastapi import status

from flagpost.models.user import VerificationStatus
from tests.conftest import auth_headers, created_payload, signed_headers


def test_login_creates_record(client) -> None:
    response = client.post(
        "/api/v1/users/login",
        json={"name": "Ada", "email": "ada@example.com"},
        headers=auth_headers("user_login"),
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["external_id"] == "user_login"
    assert body["verification_status"] == "none"
    assert body["is_approved"] is False
    assert body["pseudonym"]


def test_login_twice_returns_same_record(client) -> None:
    headers = auth_headers("user_twice")
    first = client.post("/api/v1/users/login", json={"name": "A"}, headers=headers).json()
    second = client.post("/api/v1/users/login", json={"name": "B"}, headers=headers).json()

    assert first["id"] == second["id"]
    assert second["name"] == "B"


def test_me_without_record_is_null(client) -> None:
    response = client.get("/api/v1/users/me", headers=auth_headers("user_nobody"))
    assert response.status_code == status.HTTP_200_OK
    assert response.json() is None


def test_status_lookup(client, make_user) -> None:
    user = make_user("user_lookup", status=VerificationStatus.PENDING)

    response = client.get(
        "/api/v1/users/user_lookup/status", headers=auth_headers("user_someone")
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == user.id
    assert response.json()["verification_status"] == "pending"


def test_missing_token_is_rejected(client) -> None:
    response = client.get("/api/v1/users/me")
    assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


def test_invalid_token_is_rejected(client) -> None:
    response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_submit_documents_and_finish_onboarding(client, make_user) -> None:
    make_user("user_onboarding")
    headers = auth_headers("user_onboarding")

    response = client.post(
        "/api/v1/users/me/documents", json={"selfie_ref": "storage-selfie"}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["verification_status"] == "pending"

    response = client.post("/api/v1/users/me/onboarding/complete", headers=headers)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["code"] == "PRECONDITION_FAILED"

    client.post("/api/v1/users/me/documents", json={"id_document_ref": "storage-id"}, headers=headers)
    response = client.post("/api/v1/users/me/onboarding/complete", headers=headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["has_completed_onboarding"] is True


def test_submit_documents_requires_one(client, make_user) -> None:
    make_user("user_nothing")
    response = client.post(
        "/api/v1/users/me/documents", json={}, headers=auth_headers("user_nothing")
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_submit_unknown_document_is_bad_gateway(client, make_user) -> None:
    make_user("user_bad_upload")
    response = client.post(
        "/api/v1/users/me/documents",
        json={"selfie_ref": "storage-never-uploaded"},
        headers=auth_headers("user_bad_upload"),
    )
    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert response.json()["code"] == "UPSTREAM_FAILURE"


def test_submit_before_signup_processed(client) -> None:
    response = client.post(
        "/api/v1/users/me/documents",
        json={"selfie_ref": "storage-selfie"},
        headers=auth_headers("user_not_yet"),
    )
    assert response.status_code == status.HTTP_409_CONFLICT


def test_upload_url(client) -> None:
    response = client.post("/api/v1/files/upload-url", headers=auth_headers("user_uploader"))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["upload_url"].startswith("http://storage.test/")


def test_empty_login_after_signup_webhook_keeps_profile(client) -> None:
    payload = created_payload("user_hooked")
    hook = client.post("/api/v1/webhooks/identity", content=payload, headers=signed_headers(payload))
    assert hook.status_code == status.HTTP_200_OK

    response = client.post("/api/v1/users/login", json={}, headers=auth_headers("user_hooked"))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Grace Hopper"
    assert response.json()["email"] == "grace@example.com"

    me = client.get("/api/v1/users/me", headers=auth_headers("user_hooked")).json()
    assert me["name"] == "Grace Hopper"
