"""PixSearch Backend -- FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from pixsearch import __version__
from pixsearch.api.router import api_router
from pixsearch.config import settings
from pixsearch.core.exceptions import (
    AuthorizationError,
    PersistenceError,
    PixSearchException,
    ProviderError,
    ValidationError,
)
from pixsearch.db.session import engine
from pixsearch.models import Base
from pixsearch.schemas import ErrorResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.DEBUG else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = structlog.get_logger(__name__)

# Messages shown to clients; internal causes only go to the log
_PUBLIC_MESSAGES = {
    PersistenceError: "Search storage is unavailable",
    ProviderError: "Image search is unavailable",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("starting_api_server", environment=settings.ENVIRONMENT, debug=settings.DEBUG)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_tables_ready")

    if not settings.UNSPLASH_ACCESS_KEY:
        logger.warning("unsplash_access_key_missing", message="searches will fail at the fetch step")

    yield

    logger.info("shutting_down_api_server")
    await engine.dispose()


app = FastAPI(
    title="PixSearch API",
    description="Image search with per-user history and top searches",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:5173",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PixSearchException)
async def pixsearch_exception_handler(request: Request, exc: PixSearchException):
    """Translate domain errors into short JSON error bodies."""
    if isinstance(exc, (ValidationError, AuthorizationError)):
        logger.info("request_rejected", path=request.url.path, code=exc.code, reason=exc.message)
        message = exc.message
    else:
        logger.error("request_failed", path=request.url.path, code=exc.code, error=exc.message)
        message = _PUBLIC_MESSAGES.get(type(exc), "Internal server error")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthorizationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=message, code=exc.code).model_dump(),
        headers=headers,
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Database errors that escaped a service are reported as persistence failures."""
    logger.error("unhandled_database_error", path=request.url.path, error=type(exc).__name__)
    return await pixsearch_exception_handler(request, PersistenceError("access"))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are validation errors, reported as 400."""
    logger.info("request_body_invalid", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body", code=ValidationError.code).model_dump(),
    )


# Register API router
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "PixSearch API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else None,
        "health": "/api/health",
    }
