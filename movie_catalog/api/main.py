"""
FastAPI application entry point for the Movie Catalog API.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog import __version__
from movie_catalog.api.config import (
    get_allowed_origins,
    get_api_host,
    get_api_port,
    get_log_backup_count,
    get_log_dir,
    get_log_file,
    get_log_level,
    get_log_max_bytes,
)
from movie_catalog.api.dependencies import get_movie_store
from movie_catalog.api.routers import movies, system
from movie_catalog.utils import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the store at startup so bad seed data fails the boot, not a request."""
    store_provider = app.dependency_overrides.get(get_movie_store, get_movie_store)
    store = store_provider()
    logger.info(f"Movie catalog ready with {store.count()} movies")
    yield


app = FastAPI(
    title="Movie Catalog API",
    description="REST API for browsing, creating and editing movie records",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Configure logging and serve the app with uvicorn."""
    setup_logging(
        level=get_log_level(),
        log_file=get_log_file(),
        log_dir=get_log_dir(),
        max_bytes=get_log_max_bytes(),
        backup_count=get_log_backup_count(),
    )
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    run()
