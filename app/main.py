"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.errors import ConflictError, InvalidSetError, NotFoundError, UnexpectedStoreError
from app.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


# Domain errors -> HTTP

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(InvalidSetError)
async def invalid_set_handler(request: Request, exc: InvalidSetError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


@app.exception_handler(UnexpectedStoreError)
async def unexpected_store_handler(request: Request, exc: UnexpectedStoreError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={"detail": "Unexpected storage error"})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Liftlog API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "liftlog-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
    }
