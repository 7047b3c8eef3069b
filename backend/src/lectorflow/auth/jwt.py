"""JWT token generation and validation

The identity provider issues HS256 bearer tokens whose ``sub`` claim is the
caller identity. This module validates those tokens and, for development and
tests, can mint them.

Token Claims:
- sub (Subject): Identity string, e.g. "alice"
- email: Optional email address for display/logging
- iat (Issued At): Unix timestamp when the token was created
- exp (Expiration): Unix timestamp when the token expires
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

import jwt

from ..config import get_settings


def create_access_token(identity: str, email: Optional[str] = None) -> str:
    """Create a signed access token for an identity.

    Args:
        identity: Identity string stored in the ``sub`` claim
        email: Optional email claim

    Returns:
        str: Signed JWT token
    """
    settings = get_settings()

    now = datetime.now(timezone.utc)
    expiration = now + timedelta(minutes=settings.JWT_EXPIRY_MINUTES)

    payload: Dict[str, Any] = {
        'sub': identity,
        'iat': int(now.timestamp()),
        'exp': int(expiration.timestamp()),
    }
    if email:
        payload['email'] = email

    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Args:
        token: Encoded JWT string

    Returns:
        Dict[str, Any]: Token claims

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is malformed or signature is invalid
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
