from fastapi import Request

from ...application.use_cases.login_user import ITokenService
from ...application.use_cases.manage_students import IStudentRepository
from ...application.use_cases.register_user import IPasswordHasher, IUserRepository
from ...config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_student_repo(request: Request) -> IStudentRepository:
    return request.app.state.students


def get_user_repo(request: Request) -> IUserRepository:
    return request.app.state.users


def get_hasher(request: Request) -> IPasswordHasher:
    return request.app.state.hasher


def get_token_service(request: Request) -> ITokenService:
    return request.app.state.tokens
