"""Domain errors raised by the stores and use cases.

Each error carries the HTTP status it maps to so the HTTP layer can render
every failure with a single exception handler.
"""


class DomainError(Exception):
    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(DomainError):
    status_code = 400
    message = "Invalid request"


class MissingField(ValidationError):
    message = "Missing required field"


class MissingCredentials(ValidationError):
    message = "Please provide username and password"


class DuplicateEmail(DomainError):
    status_code = 409
    message = "Email already exists"


class DuplicateUsername(DomainError):
    status_code = 409
    message = "Username already exists"


class NotFound(DomainError):
    status_code = 404
    message = "Not found"


class StudentNotFound(NotFound):
    def __init__(self, student_id: int | str):
        self.student_id = student_id
        super().__init__(f"Student with id {student_id} not found")


class UnmatchedRoute(NotFound):
    message = "Endpoint not found"


class MissingToken(DomainError):
    status_code = 401
    message = "Access token required"


class InvalidCredentials(DomainError):
    status_code = 401
    message = "Invalid credentials"


class InvalidToken(DomainError):
    status_code = 403
    message = "Invalid or expired token"


class Forbidden(DomainError):
    status_code = 403
    message = "Admin access required"
