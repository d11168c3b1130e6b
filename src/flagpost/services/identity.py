"""Identity provider lifecycle events.

Signature checking is delegated to ``svix``; nothing in this module touches
the database until :func:`verify_event` has accepted the payload.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sqlalchemy.orm import Session
from svix.webhooks import Webhook, WebhookVerificationError

from flagpost.schemas.webhook import IdentityEvent, IdentityUserData
from flagpost.services.verification import delete_user_by_external_id, upsert_on_login

# Configure logger for this module
logger = logging.getLogger(__name__)

USER_CREATED = "user.created"
USER_DELETED = "user.deleted"


class WebhookRejected(ValueError):
    """Raised when a webhook payload fails signature verification."""


def verify_event(secret: str | None, payload: bytes, headers: Mapping[str, str]) -> IdentityEvent:
    """Verify a signed payload and return the parsed event.

    Raises:
        WebhookRejected: If no secret is configured or the signature is invalid.
    """
    if not secret:
        raise WebhookRejected("Webhook signing secret is not configured")
    try:
        body = Webhook(secret).verify(payload, dict(headers))
    except WebhookVerificationError as exc:
        raise WebhookRejected(str(exc)) from exc
    return IdentityEvent.model_validate(body)


def apply_event(db: Session, event: IdentityEvent) -> str:
    """Apply a verified event and return a short description of what happened."""
    data = IdentityUserData.model_validate(event.data)
    logger.info("Received identity event %s for %s", event.type, data.id)

    if event.type == USER_CREATED:
        if not data.id:
            raise WebhookRejected("user.created event without an id")
        user = upsert_on_login(db, data.id, name=data.full_name, email=data.primary_email)
        return f"user {user.id} created"

    if event.type == USER_DELETED:
        deleted = delete_user_by_external_id(db, data.id or "")
        return "user deleted" if deleted else "user already absent"

    logger.info("Unhandled identity event type: %s", event.type)
    return "ignored"
