from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .dependencies import get_settings, get_token_service
from ...application.dto import TokenClaims
from ...application.use_cases.login_user import ITokenService
from ...config import Settings
from ...domain.entities import Role
from ...domain.errors import Forbidden, MissingToken

bearer = HTTPBearer(auto_error=False)


def authenticate(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    settings: Settings = Depends(get_settings),
    tokens: ITokenService = Depends(get_token_service),
) -> TokenClaims | None:
    """Attach the bearer token's claims to ``request.state.user``.

    Returns None without checking anything when auth is disabled.
    """
    if not settings.AUTH_ENABLED:
        return None
    if creds is None:
        raise MissingToken()
    claims = tokens.verify(creds.credentials)
    request.state.user = claims
    return claims


def authorize_admin(claims: TokenClaims | None = Depends(authenticate)) -> TokenClaims | None:
    if claims is None:
        return None
    if claims.role != Role.ADMIN:
        raise Forbidden()
    return claims


def current_user(claims: TokenClaims | None = Depends(authenticate)) -> TokenClaims:
    if claims is None:
        raise MissingToken()
    return claims
