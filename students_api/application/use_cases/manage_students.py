"""Student use cases.

Create checks its required fields here. Id assignment, the grade default,
the full-record check on replace, email uniqueness and not-found handling
belong to the store behind ``IStudentRepository``.
"""
import structlog

from ..dto import StudentFields, StudentFilters
from ...domain.entities import Student
from ...domain.errors import MissingField

logger = structlog.get_logger()

CREATE_REQUIRED = ("name", "email", "course")


class IStudentRepository:
    def list_all(self) -> list[Student]: ...
    def find_by_id(self, student_id: int) -> Student: ...
    def search(self, filters: StudentFilters) -> list[Student]: ...
    def create(self, fields: StudentFields) -> Student: ...
    def replace(self, student_id: int, fields: StudentFields) -> Student: ...
    def patch(self, student_id: int, changes: dict) -> Student: ...
    def delete(self, student_id: int) -> Student: ...


def _missing(fields: StudentFields, required: tuple[str, ...]) -> list[str]:
    return [name for name in required if not getattr(fields, name)]


class CreateStudent:
    def __init__(self, repo: IStudentRepository):
        self.repo = repo

    def execute(self, fields: StudentFields) -> Student:
        if _missing(fields, CREATE_REQUIRED):
            raise MissingField("Please provide name, email, and course")
        student = self.repo.create(fields)
        logger.info("student_created", student_id=student.id)
        return student


class ReplaceStudent:
    def __init__(self, repo: IStudentRepository):
        self.repo = repo

    def execute(self, student_id: int, fields: StudentFields) -> Student:
        student = self.repo.replace(student_id, fields)
        logger.info("student_replaced", student_id=student_id)
        return student


class PatchStudent:
    def __init__(self, repo: IStudentRepository):
        self.repo = repo

    def execute(self, student_id: int, fields: StudentFields) -> Student:
        changes = {k: v for k, v in vars(fields).items() if v is not None}
        student = self.repo.patch(student_id, changes)
        logger.info("student_patched", student_id=student_id, fields=sorted(changes))
        return student


class DeleteStudent:
    def __init__(self, repo: IStudentRepository):
        self.repo = repo

    def execute(self, student_id: int) -> Student:
        student = self.repo.delete(student_id)
        logger.info("student_deleted", student_id=student_id)
        return student
