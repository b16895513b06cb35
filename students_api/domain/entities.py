from dataclasses import dataclass, asdict
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def from_request(cls, value: str | None) -> "Role":
        # anything other than an explicit "admin" registers a regular user
        return cls.ADMIN if value == cls.ADMIN.value else cls.USER


DEFAULT_GRADE = "N/A"


@dataclass(frozen=True)
class Student:
    id: int
    name: str
    email: str
    course: str
    grade: str = DEFAULT_GRADE

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class User:
    id: int | None
    username: str
    password_hash: str
    role: Role = Role.USER

    def public(self) -> dict:
        return {"id": self.id, "username": self.username, "role": self.role.value}
