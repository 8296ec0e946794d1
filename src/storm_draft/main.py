"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storm_draft import __version__
from storm_draft.api.routes.draft import router as draft_router
from storm_draft.config import settings
from storm_draft.repositories.stats_repository import StatsRepository

logger = logging.getLogger(__name__)


# Database path - absolute, or relative to the working directory
def get_database_path() -> Path:
    """Get the database path from settings."""
    return Path(settings.database_path).expanduser()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    if not hasattr(app.state, "knowledge_dir"):
        app.state.knowledge_dir = Path(settings.knowledge_dir) if settings.knowledge_dir else None
    if not hasattr(app.state, "repository"):
        try:
            app.state.repository = StatsRepository(get_database_path())
        except FileNotFoundError as e:
            logger.warning(f"Running without statistics: {e}")
            app.state.repository = None
    yield


app = FastAPI(
    title="Storm Draft",
    description="Heroes of the Storm draft assistant - live pick/ban recommendations",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "storm-draft",
        "stats_available": getattr(app.state, "repository", None) is not None,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Storm Draft API",
        "version": __version__,
        "docs": "/docs",
    }


# Register routers
app.include_router(draft_router)
