import structlog

from ..dto import RegisterUserInput
from ...domain.entities import Role, User
from ...domain.errors import DuplicateUsername, MissingCredentials

logger = structlog.get_logger()


class IUserRepository:
    def get_by_username(self, username: str) -> User | None: ...
    def create(self, username: str, password_hash: str, role: Role = Role.USER) -> User: ...


class IPasswordHasher:
    def hash(self, plain: str) -> str: ...
    def verify(self, plain: str, hashed: str) -> bool: ...
    async def hash_async(self, plain: str) -> str: ...
    async def verify_async(self, plain: str, hashed: str) -> bool: ...


class RegisterUser:
    def __init__(self, repo: IUserRepository, hasher: IPasswordHasher):
        self.repo = repo
        self.hasher = hasher

    async def execute(self, data: RegisterUserInput) -> User:
        if not data.username or not data.password:
            raise MissingCredentials()
        if self.repo.get_by_username(data.username):
            raise DuplicateUsername()
        role = Role.from_request(data.role)
        pwd_hash = await self.hasher.hash_async(data.password)
        # another registration may have taken the name while hashing; the store re-checks
        user = self.repo.create(data.username, pwd_hash, role)
        logger.info("user_registered", user_id=user.id, username=user.username, role=user.role.value)
        return user
