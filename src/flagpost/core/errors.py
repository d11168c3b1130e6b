"""Domain exceptions shared by the service layer.

Every exception carries a machine-readable ``code`` so the HTTP layer can map
it to a status without inspecting messages.
"""

from __future__ import annotations


class FlagpostError(RuntimeError):
    """Base class for all domain failures."""

    code = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(FlagpostError):
    """Caller is not on the admin allow-list."""

    code = "UNAUTHORIZED"


class NotFound(FlagpostError):
    """Referenced user, post or comment does not exist."""

    code = "NOT_FOUND"


class PreconditionFailed(FlagpostError):
    """Operation called before its prerequisite state exists.

    Typically the identity provider's user-created event has not been
    processed yet; clients should refresh and retry.
    """

    code = "PRECONDITION_FAILED"


class UpstreamIntegrationFailure(FlagpostError):
    """File storage returned a non-success response or was unreachable."""

    code = "UPSTREAM_FAILURE"
