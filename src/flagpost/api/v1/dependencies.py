"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from flagpost.core.settings import settings
from flagpost.db.session import get_db
from flagpost.models import User
from flagpost.services.admin import AdminService
from flagpost.services.authz import AdminPolicy, get_admin_policy
from flagpost.services.storage import StorageClient, get_storage_client

# HTTP Bearer scheme for identity provider session tokens
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the caller's external id from the provider-issued session token.

    Raises:
        HTTPException: If the token is invalid or carries no subject
    """
    options = {"verify_aud": False}
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.identity_jwt_key,
            algorithms=[settings.identity_jwt_algorithm],
            issuer=settings.identity_jwt_issuer,
            options=options,
        )
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return str(subject)


IdentityDep = Annotated[str, Depends(get_current_identity)]


def get_current_user(identity: IdentityDep, db: SessionDep) -> User:
    """Resolve the caller's account record.

    Raises:
        HTTPException: 409 if the sign-up webhook has not created the record yet
    """
    user = db.query(User).filter(User.external_id == identity).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Account not set up yet; please refresh",
        )
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_storage_client_dep() -> StorageClient:
    """Return the shared storage client."""
    return get_storage_client()


StorageDep = Annotated[StorageClient, Depends(get_storage_client_dep)]
AdminPolicyDep = Annotated[AdminPolicy, Depends(get_admin_policy)]


def get_admin_service(policy: AdminPolicyDep) -> AdminService:
    """Return an admin service bound to the configured allow-list."""
    return AdminService(policy)


AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
