from fastapi import APIRouter, Depends

from ..dependencies import get_settings
from ....config import Settings
from ....infrastructure.metrics import metrics_endpoint

router = APIRouter(tags=["system"])

STUDENT_ENDPOINTS = {
    "GET /students": ("Get all students", None),
    "GET /students/:id": ("Get a specific student", None),
    "GET /students/search?name=value&course=value&grade=value": ("Search students", None),
    "POST /students": ("Create a new student", "auth"),
    "PUT /students/:id": ("Update a student (full update)", "admin"),
    "PATCH /students/:id": ("Update a student (partial update)", "admin"),
    "DELETE /students/:id": ("Delete a student", "admin"),
}

AUTH_ENDPOINTS = {
    "POST /auth/register": ("Register a new user", None),
    "POST /auth/login": ("Log in and receive a token", None),
    "GET /auth/me": ("Get the current user", "auth"),
}

REQUIREMENT_NOTES = {"auth": " (requires token)", "admin": " (requires admin token)"}


def build_directory(auth_enabled: bool) -> dict[str, str]:
    endpoints = dict(STUDENT_ENDPOINTS)
    if auth_enabled:
        endpoints.update(AUTH_ENDPOINTS)
    directory = {}
    for route, (description, needs) in endpoints.items():
        if auth_enabled and needs:
            description += REQUIREMENT_NOTES[needs]
        directory[route] = description
    return directory


@router.get("/")
def root(settings: Settings = Depends(get_settings)):
    return {
        "message": "Welcome to the Students API",
        "endpoints": build_directory(settings.AUTH_ENABLED),
    }


@router.get("/health")
def health(): return {"status": "ok"}


@router.get("/metrics")
def metrics():
    return metrics_endpoint()
