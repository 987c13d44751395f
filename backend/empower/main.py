"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from empower.api.routes import roadmaps, sessions, tasks
from empower.core.config import get_settings
from empower.core.logging import configure_logging, get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    configure_logging(debug=settings.DEBUG)
    logger.info(
        "Starting EMPOWER roadmap service",
        version=settings.APP_VERSION,
        env=settings.ENV,
        debug=settings.DEBUG,
    )
    yield
    logger.info("Shutting down EMPOWER roadmap service")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Learning roadmap, milestone and checkpoint tracking for EMPOWER",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sessions.router, prefix="/api")
app.include_router(roadmaps.router, prefix="/api")
app.include_router(tasks.router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "env": settings.ENV,
    }


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


def run() -> None:
    """Run the API server with uvicorn."""
    uvicorn.run("empower.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
