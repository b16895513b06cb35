import time
import logging
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_JWT_SECRET, Settings, settings as default_settings
from .domain.errors import DomainError, StudentNotFound, UnmatchedRoute
from .infrastructure.metrics import http_requests_total, http_request_duration_seconds
from .infrastructure.repositories import InMemoryStudentRepository, InMemoryUserRepository
from .infrastructure.security import PasswordHasher, TokenService
from .infrastructure.seed import seed_students, seed_users
from .interfaces.http.routers import auth as auth_router
from .interfaces.http.routers import students as students_router
from .interfaces.http.routers import system as system_router

VERSION = "0.1.0"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message, **extra})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(
            "request_rejected",
            path=request.url.path,
            error=type(exc).__name__,
            status_code=exc.status_code,
        )
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # 404 and 405 from routing both mean no endpoint matched
        if exc.status_code in (404, 405):
            return _error(UnmatchedRoute.status_code, UnmatchedRoute.message)
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # an id that is not a number can never match a student
        if any(tuple(err.get("loc", ())) == ("path", "student_id") for err in exc.errors()):
            raw_id = request.path_params.get("student_id", "")
            return await domain_error_handler(request, StudentNotFound(raw_id))
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return _error(400, "Invalid request", errors=errors)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Students Service", version=VERSION)
    app.state.settings = settings
    app.state.students = InMemoryStudentRepository()
    app.state.users = InMemoryUserRepository()
    app.state.hasher = PasswordHasher()
    app.state.tokens = TokenService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_minutes=settings.JWT_EXPIRES_MINUTES,
    )

    if settings.SEED_DATA:
        seed_students(app.state.students)
        if settings.AUTH_ENABLED:
            seed_users(app.state.users, app.state.hasher)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def observe_request(request: Request, call_next):
        start_time = time.time()
        method = request.method

        response = await call_next(request)

        route = request.scope.get("route")
        endpoint = getattr(route, "path", "unmatched")
        duration = time.time() - start_time
        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

        logger.info(
            "http_request",
            method=method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(duration * 1000, 2)
        )
        return response

    @app.on_event("startup")
    def on_startup():
        logger.info(
            "Starting students service",
            version=VERSION,
            auth_enabled=settings.AUTH_ENABLED,
            students=len(app.state.students),
        )
        if settings.AUTH_ENABLED and settings.JWT_SECRET == DEFAULT_JWT_SECRET:
            logger.warning("Using the default JWT_SECRET; set JWT_SECRET outside development")

    register_error_handlers(app)

    app.include_router(system_router.router)
    app.include_router(students_router.router)
    if settings.AUTH_ENABLED:
        app.include_router(auth_router.router)
    return app


app = create_app()
