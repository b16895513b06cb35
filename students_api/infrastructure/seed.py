import structlog

from ..application.dto import StudentFields
from ..domain.entities import Role
from .repositories import InMemoryStudentRepository, InMemoryUserRepository
from .security import PasswordHasher

logger = structlog.get_logger()

SEED_STUDENTS = [
    StudentFields(name="John Doe", email="john@example.com", course="Computer Science", grade="A"),
    StudentFields(name="Jane Smith", email="jane@example.com", course="Mathematics", grade="B"),
    StudentFields(name="Bob Johnson", email="bob@example.com", course="Physics", grade="A"),
]

SEED_USERS = [
    ("teacher", "teacher123", Role.ADMIN),
    ("student", "student123", Role.USER),
]


def seed_students(repo: InMemoryStudentRepository) -> None:
    for fields in SEED_STUDENTS:
        repo.create(StudentFields(**vars(fields)))
    logger.info("students_seeded", count=len(repo))


def seed_users(repo: InMemoryUserRepository, hasher: PasswordHasher) -> None:
    for username, password, role in SEED_USERS:
        repo.create(username, hasher.hash(password), role)
    logger.info("users_seeded", count=len(repo))
