"""Platform access token utilities.

The auth platform signs user access tokens with the project's JWT secret;
we verify them locally instead of calling the platform on every request.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import BaseModel

from polly.config import PlatformSettings


class TokenPayload(BaseModel):
    """Access token payload."""

    sub: str
    email: str | None = None
    exp: datetime
    user_metadata: dict[str, Any] = {}


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str | None,
    name: str | None,
    settings: PlatformSettings,
    expires_in: int = 3600,
) -> str:
    """Create an access token shaped like the platform's.

    Used by the mock platform client and by tests.

    Args:
        user_id: User ID (``sub`` claim)
        email: User email
        name: Display name stored in ``user_metadata``
        settings: Platform settings
        expires_in: Lifetime in seconds

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(seconds=expires_in)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "user_metadata": {"name": name} if name else {},
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: PlatformSettings) -> TokenPayload:
    """Verify and decode a platform access token.

    Args:
        token: JWT token to verify
        settings: Platform settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
