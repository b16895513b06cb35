from typing import Generic, TypeVar

from pydantic import BaseModel

from ...application.dto import StudentFields

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    message: str | None = None
    count: int | None = None
    data: T | None = None


class StudentIn(BaseModel):
    # presence is checked by the use cases so the error stays a 400
    name: str | None = None
    email: str | None = None
    course: str | None = None
    grade: str | None = None

    def to_fields(self) -> StudentFields:
        return StudentFields(name=self.name, email=self.email, course=self.course, grade=self.grade)


class StudentOut(BaseModel):
    id: int
    name: str
    email: str
    course: str
    grade: str
    class Config: from_attributes = True


class RegisterReq(BaseModel):
    username: str | None = None
    password: str | None = None
    role: str | None = None


class LoginReq(BaseModel):
    username: str | None = None
    password: str | None = None


class UserResp(BaseModel):
    id: int
    username: str
    role: str


class TokenResp(BaseModel):
    token: str
    user: UserResp
