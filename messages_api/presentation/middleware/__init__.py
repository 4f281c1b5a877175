from .auth import (
    ACCESS_TOKEN_COOKIE,
    AuthenticatedUser,
    JWTAuthenticator,
    create_access_token,
    get_authenticator,
    get_current_user,
    require_auth,
)
from .correlation import CorrelationIdMiddleware

__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "AuthenticatedUser",
    "CorrelationIdMiddleware",
    "JWTAuthenticator",
    "create_access_token",
    "get_authenticator",
    "get_current_user",
    "require_auth",
]
