"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from hunt.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    Carries the identity snapshot used to attribute posts, comments and
    votes without a user lookup.
    """

    user_id: str
    first_name: str
    last_name: str
    email: str
    location: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    first_name: str,
    last_name: str,
    email: str,
    location: str,
    settings: AuthSettings,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        first_name: User first name
        last_name: User last name
        email: User email
        location: User location
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "location": location,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Signed by us but missing identity claims
        raise JWTError("Invalid token")
