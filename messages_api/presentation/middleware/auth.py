"""JWT authentication dependencies.

The caller identity is the ``username`` claim of a signed bearer token,
falling back to ``sub``. Tokens are read from the Authorization header
first and from the ``access_token`` cookie otherwise.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ...config import settings

logger = structlog.get_logger()

security = HTTPBearer(auto_error=False)

ACCESS_TOKEN_COOKIE = "access_token"  # noqa: S105

REQUIRED_CLAIMS = ["exp"]


@dataclass
class AuthenticatedUser:
    """Represents an authenticated user from JWT claims."""

    username: str
    claims: dict[str, Any] | None = None


class JWTAuthenticator:
    """Verifies tokens signed with a shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", issuer: str | None = None):
        if not secret_key:
            raise ValueError("A secret key is required for JWT validation")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer

    def create_token(self, username: str, expires_in: timedelta = timedelta(hours=1)) -> str:
        now = datetime.now(UTC)
        claims: dict[str, Any] = {
            "sub": username,
            "username": username,
            "iat": now,
            "exp": now + expires_in,
        }
        if self._issuer:
            claims["iss"] = self._issuer
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> dict[str, Any]:
        """Verify signature, algorithm, expiry and issuer; return the claims."""
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require_exp": True, "verify_aud": False},
            )
            missing = [claim for claim in REQUIRED_CLAIMS if claim not in claims]
            if missing:
                raise JWTError(f"Missing required claims: {missing}")
            return claims
        except JWTError as e:
            logger.warning("JWT verification failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e


_authenticator: JWTAuthenticator | None = None


def get_authenticator() -> JWTAuthenticator:
    global _authenticator
    if _authenticator is None:
        _authenticator = JWTAuthenticator(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
        )
    return _authenticator


def create_access_token(username: str) -> str:
    """Issue a token for ``username`` using the configured secret."""
    return get_authenticator().create_token(
        username, expires_in=timedelta(minutes=settings.access_token_expire_minutes)
    )


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    authenticator: Annotated[JWTAuthenticator, Depends(get_authenticator)],
) -> AuthenticatedUser | None:
    """Dependency returning the caller, or None when no token was sent."""
    token = credentials.credentials if credentials else request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token:
        return None

    claims = authenticator.verify_token(token)

    username = claims.get("username") or claims.get("sub")
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: missing username",
            headers={"WWW-Authenticate": "Bearer"},
        )

    structlog.contextvars.bind_contextvars(username=username)
    return AuthenticatedUser(username=username, claims=claims)


async def require_auth(
    user: Annotated[AuthenticatedUser | None, Depends(get_current_user)],
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.
    Raises 401 if user is not authenticated.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
