import structlog

from .register_user import IUserRepository, IPasswordHasher
from ..dto import LoginResult, TokenClaims
from ...domain.entities import User
from ...domain.errors import InvalidCredentials, MissingCredentials

logger = structlog.get_logger()


class ITokenService:
    def issue(self, user: User, minutes: int | None = None) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...


class LoginUser:
    def __init__(self, repo: IUserRepository, hasher: IPasswordHasher, tokens: ITokenService):
        self.repo = repo
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, username: str | None, password: str | None) -> LoginResult:
        if not username or not password:
            raise MissingCredentials()

        user = self.repo.get_by_username(username)
        # unknown user and wrong password fail the same way
        if user is None or not await self.hasher.verify_async(password, user.password_hash):
            logger.info("login_failed", username=username)
            raise InvalidCredentials()

        token = self.tokens.issue(user)
        logger.info("login_succeeded", user_id=user.id, role=user.role.value)
        return LoginResult(token=token, user=user.public())
