"""Main FastAPI application."""
from contextlib import asynccontextmanager
from time import perf_counter
from typing import Optional
import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from traininghub.core.config import Settings, get_settings
from traininghub.core.database import Database
from traininghub.core.limiter import configure_limiter
from traininghub.core.logging_config import configure_logging
from traininghub.api import auth, users, surveys, training, analytics

logger = logging.getLogger(__name__)

ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "authentication_failed",
    status.HTTP_403_FORBIDDEN: "permission_denied",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_429_TOO_MANY_REQUESTS: "rate_limited",
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def _error_response(request: Request, status_code: int, *, code: str, message: str,
                    headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "code": code,
            "request_id": _request_id(request),
        },
        headers={**(headers or {}), "X-Request-Id": _request_id(request)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict):
        code = str(detail.get("code") or ERROR_CODES.get(exc.status_code, f"http_{exc.status_code}"))
        message = str(detail.get("message") or "Request failed")
    else:
        code = ERROR_CODES.get(exc.status_code, f"http_{exc.status_code}")
        message = str(detail)

    return _error_response(
        request,
        exc.status_code,
        code=code,
        message=message,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Request validation failed")
    if location:
        message = f"{location}: {message}"

    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        code="validation_error",
        message=message,
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    return _error_response(
        request,
        status.HTTP_429_TOO_MANY_REQUESTS,
        code="rate_limited",
        message="Too many requests",
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="internal_error",
        message="Unexpected server error",
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    The data-access handle is created here (or injected, in tests) and
    disposed when the app shuts down.
    """
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)

    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting TrainingHub API (%s)", settings.ENVIRONMENT)
        if settings.AUTO_CREATE_TABLES:
            database.create_all()
            logger.info("Database tables created")
        yield
        logger.info("Shutting down TrainingHub API")
        database.dispose()

    app = FastAPI(
        title="TrainingHub API",
        description="Surveys, training requests and workshop proposals",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = perf_counter()

        response = await call_next(request)

        elapsed_ms = (perf_counter() - start) * 1000
        response.headers["X-Request-Id"] = request_id
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Rate limiter
    app.state.limiter = configure_limiter(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With", "X-Request-Id"],
    )

    # Include routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(surveys.router)
    app.include_router(training.router)
    app.include_router(analytics.router)

    @app.get("/")
    def root():
        """Service banner."""
        return {
            "message": "TrainingHub API",
            "status": "running",
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health")
    def health():
        """Health check endpoint with real DB connectivity test."""
        result = {"status": "healthy", "database": "disconnected"}
        http_status = 200

        try:
            database.ping()
            result["database"] = "connected"
        except Exception as exc:
            logger.warning("Health check failed: %s", exc)
            result["status"] = "degraded"
            result["database"] = f"error: {str(exc)[:120]}"
            http_status = 503

        return JSONResponse(content=result, status_code=http_status)

    return app
