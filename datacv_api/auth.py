"""
Authentication Module

Handles API authentication (shared bearer secret) and caller identity.
The calling user's id arrives in the X-User-Id header set by the
upstream session layer; admin rights come from ADMIN_USER_IDS.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


@dataclass
class UserContext:
    """Identity of the caller for a request."""

    user_id: str
    is_admin: bool = False


def get_api_secret() -> str:
    """Get the API secret from validated config."""
    if not settings.api_secret:
        raise ValueError("API_SECRET environment variable is required for authentication")
    return settings.api_secret


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[HTTPAuthorizationCredentials]:
    """
    Verify shared secret token.

    Raises:
        HTTPException: 401 if the token is missing or invalid,
            500 if auth is required but no secret is configured
    """
    if not settings.auth_required:
        return credentials

    try:
        expected_secret = get_api_secret()
    except ValueError:
        raise HTTPException(
            status_code=500,
            detail="Server authentication not configured"
        )

    if credentials is None or credentials.credentials != expected_secret:
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token"
        )

    return credentials


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    _credentials: Optional[HTTPAuthorizationCredentials] = Depends(verify_token),
) -> UserContext:
    """
    Resolve the calling user.

    Raises:
        HTTPException: 401 if no user id was supplied
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")

    user_id = x_user_id.strip()
    return UserContext(user_id=user_id, is_admin=user_id in settings.admin_user_id_set)


async def require_admin(user: UserContext = Depends(get_current_user)) -> UserContext:
    """
    Raises:
        HTTPException: 403 if the caller is not an admin
    """
    if not user.is_admin:
        logger.warning(f"Admin access denied for user {user.user_id}")
        raise HTTPException(status_code=403, detail="Admin privileges required")
    return user
