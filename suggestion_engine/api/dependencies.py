"""
API Dependencies

FastAPI dependency injection for authentication and common services.

Security: bearer tokens are HS256 JWTs verified with ``JWT_SECRET``; the
``sub`` claim carries the integer user id. Never decode without verification.
"""

import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from suggestion_engine.config.settings import get_settings


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def decode_access_token(token: str) -> dict:
    """Verify a bearer token and return its claims."""
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        options={
            "require": ["exp", "sub"],
            "verify_aud": settings.jwt_audience is not None,
        },
    )


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> int:
    """
    Extract and verify the user id from a bearer token.

    The id is also stored on ``request.state.user_id`` so the behavior
    capture middleware can attribute the request once it completes.

    Raises:
        HTTPException 401: token missing, expired, invalid, or its subject
        is not an integer user id.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        logger.warning("JWT verification failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or unverifiable token",
        )

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing user ID",
        )

    request.state.user_id = user_id
    return user_id


# =============================================================================
# Re-export DB dependencies for a single import source
# Routers should import from api.dependencies, not db.dependencies directly.
# =============================================================================
from suggestion_engine.infrastructure.db.dependencies import (  # noqa: E402, F401
    SessionDep,
    BehaviorRecorderDep,
    PreferenceServiceDep,
    SuggestionServiceDep,
)
