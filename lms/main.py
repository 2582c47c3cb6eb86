"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import jwt
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from lms.cache import close_cache, initialize_cache
from lms.config import configure_logging, get_settings
from lms.database import dispose_engine, initialize_database
from lms.domain.common.exceptions import DomainError
from lms.exceptions import LmsError
from lms.infrastructure.analytics.routers import analytics
from lms.infrastructure.common.rate_limit import limiter
from lms.infrastructure.common.routers import service
from lms.infrastructure.common.schemas import ErrorResponse
from lms.infrastructure.courses.routers import courses
from lms.infrastructure.identity.routers import auth, users
from lms.infrastructure.layout.routers import layout
from lms.infrastructure.notifications.routers import notifications
from lms.infrastructure.orders.routers import orders

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Create the database engine and Redis client on startup, release them on shutdown."""
    initialize_database(settings)
    initialize_cache(settings)
    settings.MEDIA_ROOT.mkdir(parents=True, exist_ok=True)
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started ({settings.ENVIRONMENT})")
    yield
    close_cache()
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)
app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Every failed request is rendered as `{success: false, message}`."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


@app.exception_handler(LmsError)
async def lms_error_handler(_request: Request, exc: LmsError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


@app.exception_handler(jwt.ExpiredSignatureError)
async def expired_token_handler(_request: Request, _exc: jwt.ExpiredSignatureError) -> JSONResponse:
    return error_response(400, "Json Web Token is expired, try again")


@app.exception_handler(jwt.InvalidTokenError)
async def invalid_token_handler(_request: Request, _exc: jwt.InvalidTokenError) -> JSONResponse:
    return error_response(400, "Json Web Token is invalid, try again")


@app.exception_handler(IntegrityError)
async def integrity_error_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity error: {exc.orig}")
    return error_response(400, "Duplicate field value entered")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first validation problem, prefixed with the offending field."""
    errors = exc.errors()
    if not errors:
        return error_response(400, "Invalid request")

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    return error_response(400, f"{field}: {message}" if field else message)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return error_response(429, f"Too many requests: {exc.detail}")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, f"Can't find {request.url.path} on this server!")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc)
    return error_response(500, "Internal Server Error")


app.include_router(service.router)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
app.include_router(courses.router, prefix=settings.API_V1_PREFIX)
app.include_router(orders.router, prefix=settings.API_V1_PREFIX)
app.include_router(notifications.router, prefix=settings.API_V1_PREFIX)
app.include_router(layout.router, prefix=settings.API_V1_PREFIX)
app.include_router(analytics.router, prefix=settings.API_V1_PREFIX)

app.mount(
    settings.MEDIA_URL,
    StaticFiles(directory=settings.MEDIA_ROOT, check_dir=False),
    name="media",
)
