"""FastAPI dependencies for caller identity.

- get_current_identity: the identity presented by the caller, or None
- require_identity: the identity, raising Unauthenticated when absent

Usage:
    @router.get("/submissions/mine")
    def mine(identity: str = Depends(require_identity)):
        ...
"""

import logging
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ..errors import Unauthenticated
from .jwt import decode_token

logger = logging.getLogger(__name__)

# auto_error=False: a missing header yields None so the workflow decides
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Extract the caller identity from the bearer token.

    Returns:
        The ``sub`` claim of a valid token, or None if no valid token was presented
    """
    if credentials is None:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected invalid token: {e}")
        return None

    return payload.get("sub") or None


def require_identity(identity: Optional[str] = Depends(get_current_identity)) -> str:
    """Return the caller identity or raise Unauthenticated."""
    if not identity:
        raise Unauthenticated("User must be logged in.")
    return identity
