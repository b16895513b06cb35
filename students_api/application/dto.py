from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ..domain.entities import Role


@dataclass
class StudentFields:
    name: str | None = None
    email: str | None = None
    course: str | None = None
    grade: str | None = None


@dataclass
class StudentFilters:
    name: str | None = None
    course: str | None = None
    grade: str | None = None


@dataclass
class RegisterUserInput:
    username: str | None
    password: str | None
    role: str | None = None


class TokenClaims(BaseModel):
    """Claims carried by a session token, validated when the token is decoded."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    role: Role


@dataclass
class LoginResult:
    token: str
    user: dict
