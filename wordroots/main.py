"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError as FastAPIRequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wordroots.config import configure_logging
from wordroots.core import container
from wordroots.domain.common.exceptions import DomainError
from wordroots.exceptions import WordRootsError
from wordroots.infrastructure.common.schemas.response_wrappers import (
    ErrorResponse,
    HealthResponse,
    ServiceInfoResponse,
)
from wordroots.infrastructure.learning.routers import (
    content,
    generation,
    morphemes,
    practice,
    suggestions,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = container.settings()
    configure_logging(settings.ENVIRONMENT)
    container.content_store().ensure_layout()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        data_dir=str(settings.DATA_DIR),
        webhook_enabled=settings.webhook_enabled,
    )
    yield


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _describe_request_errors(exc: FastAPIRequestValidationError) -> str:
    # Empty strings count as missing, as they did for the browser client
    missing = [
        str(err["loc"][-1])
        for err in exc.errors()
        if err.get("type") in ("missing", "string_too_short")
    ]
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        return f"{' and '.join(missing)} {verb} required"
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"] if part != "body")
    return f"Invalid {location}: {first['msg']}"


async def wordroots_error_handler(request: Request, exc: WordRootsError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    else:
        logger.info("request_rejected", path=request.url.path, error=exc.message)
    return _error(exc.status_code, exc.message)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("request_rejected", path=request.url.path, error=exc.message)
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(
    request: Request, exc: FastAPIRequestValidationError
) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, _describe_request_errors(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = container.settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WordRootsError, wordroots_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        FastAPIRequestValidationError,
        request_validation_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]

    for module in (content, morphemes, generation, suggestions, practice):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    @app.get("/", response_model=ServiceInfoResponse)
    def root() -> ServiceInfoResponse:
        return ServiceInfoResponse(message="Welcome to wordroots API", version=settings.VERSION)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="healthy")

    return app


app = create_app()
