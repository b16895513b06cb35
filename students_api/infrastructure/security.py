from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ..application.dto import TokenClaims
from ..application.use_cases.login_user import ITokenService
from ..application.use_cases.register_user import IPasswordHasher
from ..domain.entities import User
from ..domain.errors import InvalidToken

pwd = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__truncate_error=False,
)


class PasswordHasher(IPasswordHasher):
    def hash(self, plain: str) -> str: return pwd.hash(plain)
    def verify(self, plain: str, hashed: str) -> bool: return pwd.verify(plain, hashed)

    async def hash_async(self, plain: str) -> str:
        return await run_in_threadpool(self.hash, plain)

    async def verify_async(self, plain: str, hashed: str) -> bool:
        return await run_in_threadpool(self.verify, plain, hashed)


class TokenService(ITokenService):
    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60 * 24):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, user: User, minutes: int | None = None) -> str:
        now = datetime.now(timezone.utc)
        exp = now + timedelta(minutes=self.expires_minutes if minutes is None else minutes)
        payload = {
            "sub": user.username,
            "id": user.id,
            "username": user.username,
            "role": user.role.value,
            "iat": now,
            "exp": exp,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Return the typed claims of ``token`` or raise InvalidToken.

        Covers malformed, tampered and expired tokens as well as payloads
        missing any of the identity claims.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return TokenClaims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            raise InvalidToken() from e
