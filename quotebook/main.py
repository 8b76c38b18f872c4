"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quotebook.config import configure_logging, get_settings
from quotebook.database import dispose_engine, initialize_database
from quotebook.domain.common.exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from quotebook.domain.library.exceptions import DuplicateLibraryEntryError
from quotebook.exceptions import QuotebookError
from quotebook.infrastructure.library.routers import library
from quotebook.infrastructure.reading.routers import quotes

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database engine on startup and dispose it on shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    initialize_database(settings)
    yield
    dispose_engine()
    logger.info("Shut down database engine")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuotebookError)
async def quotebook_error_handler(_request: Request, exc: QuotebookError) -> JSONResponse:
    """Handle application errors that carry their own status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Service error: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": "An unexpected error occurred. Please try again later."},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors to HTTP responses."""
    if isinstance(exc, DuplicateLibraryEntryError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message, "user_book_id": str(exc.existing_entry_id)},
        )
    if isinstance(exc, AuthorizationError):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": exc.message})
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
        )
    if isinstance(exc, EntityNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    logger.error(f"Unhandled domain error: {exc!s}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred. Please try again later."},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with the validation errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type")}
        for error in exc.errors()
    ]


# Register routers
app.include_router(library.router, prefix=settings.API_V1_PREFIX)
app.include_router(quotes.router, prefix=settings.API_V1_PREFIX)
app.include_router(quotes.library_quotes_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
