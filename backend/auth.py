"""
Authentication module for bearer JWT validation.
Provides the FastAPI dependency securing every endpoint except /health.

Tokens are HS256 JWTs issued by the external auth service. The user id is
read from ``sub``, falling back to ``userId`` (the claim written by
the legacy token issuer).
"""
import logging
from typing import Optional

import jwt
from fastapi import Header, HTTPException

from backend.settings import get_settings

logger = logging.getLogger(__name__)


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> str:
    """
    Authenticate via bearer JWT.
    Returns user_id string.

    Usage:
        @app.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide Authorization header."
        )
    return validate_jwt(authorization)


def validate_jwt(authorization: str) -> str:
    """Validate a ``Bearer <token>`` header and return the user id."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1].strip()
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub") or payload.get("userId")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    return str(user_id)
