from dataclasses import replace

from ..application.dto import StudentFields, StudentFilters
from ..application.use_cases.manage_students import IStudentRepository
from ..application.use_cases.register_user import IUserRepository
from ..domain.entities import DEFAULT_GRADE, Role, Student, User
from ..domain.errors import DuplicateEmail, DuplicateUsername, MissingField, StudentNotFound

PATCHABLE = ("name", "email", "course", "grade")
REPLACE_MESSAGE = "PUT requires all fields: name, email, course, and grade"


class InMemoryStudentRepository(IStudentRepository):
    """Students kept in insertion order in process memory."""

    def __init__(self):
        self._rows: list[Student] = []
        self._next_id = 1

    def _index_of(self, student_id: int) -> int:
        for i, row in enumerate(self._rows):
            if row.id == student_id:
                return i
        raise StudentNotFound(student_id)

    def _check_email(self, email: str, owner_id: int | None = None) -> None:
        if any(s.email == email and s.id != owner_id for s in self._rows):
            raise DuplicateEmail()

    def list_all(self) -> list[Student]:
        return list(self._rows)

    def find_by_id(self, student_id: int) -> Student:
        return self._rows[self._index_of(student_id)]

    def search(self, filters: StudentFilters) -> list[Student]:
        results = self._rows
        if filters.name:
            needle = filters.name.lower()
            results = [s for s in results if needle in s.name.lower()]
        if filters.course:
            needle = filters.course.lower()
            results = [s for s in results if needle in s.course.lower()]
        if filters.grade:
            grade = filters.grade.lower()
            results = [s for s in results if s.grade.lower() == grade]
        return list(results)

    def create(self, fields: StudentFields) -> Student:
        self._check_email(fields.email)
        row = Student(
            id=self._next_id,
            name=fields.name,
            email=fields.email,
            course=fields.course,
            grade=fields.grade or DEFAULT_GRADE,
        )
        self._next_id += 1
        self._rows.append(row)
        return row

    def replace(self, student_id: int, fields: StudentFields) -> Student:
        i = self._index_of(student_id)
        if not all((fields.name, fields.email, fields.course, fields.grade)):
            raise MissingField(REPLACE_MESSAGE)
        self._check_email(fields.email, owner_id=student_id)
        row = Student(
            id=student_id,
            name=fields.name,
            email=fields.email,
            course=fields.course,
            grade=fields.grade,
        )
        self._rows[i] = row
        return row

    def patch(self, student_id: int, changes: dict) -> Student:
        i = self._index_of(student_id)
        changes = {k: v for k, v in changes.items() if k in PATCHABLE}
        if changes.get("email"):
            self._check_email(changes["email"], owner_id=student_id)
        row = replace(self._rows[i], **changes)
        self._rows[i] = row
        return row

    def delete(self, student_id: int) -> Student:
        return self._rows.pop(self._index_of(student_id))

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryUserRepository(IUserRepository):
    def __init__(self):
        self._rows: list[User] = []
        self._next_id = 1

    def get_by_username(self, username: str) -> User | None:
        return next((u for u in self._rows if u.username == username), None)

    def create(self, username: str, password_hash: str, role: Role = Role.USER) -> User:
        if self.get_by_username(username):
            raise DuplicateUsername()
        row = User(id=self._next_id, username=username, password_hash=password_hash, role=role)
        self._next_id += 1
        self._rows.append(row)
        return row

    def __len__(self) -> int:
        return len(self._rows)
