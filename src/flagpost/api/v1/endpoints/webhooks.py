"""Inbound identity provider webhooks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from flagpost.api.v1.dependencies import SessionDep
from flagpost.core.settings import settings
from flagpost.services.identity import WebhookRejected, apply_event, verify_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/identity")
async def identity_webhook(request: Request, db: SessionDep) -> dict[str, str]:
    """Apply ``user.created`` / ``user.deleted`` events after signature verification."""
    payload = await request.body()
    try:
        event = verify_event(settings.webhook_signing_secret, payload, request.headers)
    except WebhookRejected as err:
        logger.error("Error verifying webhook: %s", err)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error verifying webhook",
        ) from err

    try:
        outcome = apply_event(db, event)
    except WebhookRejected as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return {"status": "received", "outcome": outcome}
