"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from importexport import __version__
from importexport.config.settings import get_settings
from importexport.config.logging_config import setup_logging
from importexport.repositories.sqlalchemy.database import init_db
from importexport.api.routers import templates_router, transfer_router, backends_router
from importexport.core.exceptions import AppError

ERROR_STATUS = {
    "VALIDATION_ERROR": 400,
    "NOT_FOUND": 404,
    "CONFLICT": 409,
    "SERIALIZATION_ERROR": 422,
    "BACKEND_LOAD_ERROR": 503,
    "BACKEND_INSTANTIATION_ERROR": 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Import/export templates with pluggable object and format backends",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(templates_router)
app.include_router(transfer_router)
app.include_router(backends_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.code, 400),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
