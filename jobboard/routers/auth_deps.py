"""
Authorization dependencies.
Reads the bearer token, if any, and decides whether the caller is an admin.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from jobboard.core.exceptions import AuthorizationError
from jobboard.core.security import decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False: anonymous callers reach the public endpoints
bearer_scheme = HTTPBearer(auto_error=False)


class TokenData(BaseModel):
    username: str
    is_admin: bool = False


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[TokenData]:
    """
    Returns the caller described by a valid token, or None.
    A missing, invalid or expired token means an anonymous caller, not an error.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        logger.info("Ignoring invalid bearer token")
        return None
    if payload.get("error") == "TOKEN_EXPIRED":
        logger.info("Ignoring expired bearer token")
        return None
    if payload.get("type") != "access" or not payload.get("sub"):
        logger.warning("Ignoring bearer token with unexpected claims")
        return None

    return TokenData(username=payload["sub"], is_admin=bool(payload.get("is_admin", False)))


def is_admin(user: Optional[TokenData]) -> bool:
    return user is not None and user.is_admin


def ensure_admin(current_user: Optional[TokenData] = Depends(get_current_user)) -> TokenData:
    """
    Dependency for admin-only endpoints.

    Usage:
        @router.post("", dependencies=[Depends(ensure_admin)])
    """
    if not is_admin(current_user):
        logger.warning(
            "Admin access denied",
            extra={"user": current_user.username if current_user else None}
        )
        raise AuthorizationError()
    return current_user
