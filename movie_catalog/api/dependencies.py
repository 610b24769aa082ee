"""
FastAPI dependency injection for the movie store and catalog.
"""

import json
import logging
from typing import Any

from fastapi import Depends, Request

from movie_catalog.api.config import get_seed_path
from movie_catalog.core.catalog import (
    InMemoryMovieStore,
    Invalid,
    MovieCatalog,
    MovieRepository,
    Violation,
)
from movie_catalog.core.catalog.seed import load_seed_movies
from movie_catalog.core.catalog.validator import ROOT_FIELD

logger = logging.getLogger(__name__)


# Singleton movie store
_movie_store: MovieRepository | None = None


def get_movie_store() -> MovieRepository:
    """Get or create the process-wide movie store, seeded on first use."""
    global _movie_store
    if _movie_store is None:
        seed_path = get_seed_path()
        if seed_path is None:
            logger.info("Seeding disabled, starting with an empty catalog")
            movies = []
        else:
            movies = load_seed_movies(seed_path)
        _movie_store = InMemoryMovieStore(movies)
    return _movie_store


def reset_movie_store() -> None:
    """Drop the singleton so the next request re-seeds from configuration."""
    global _movie_store
    _movie_store = None


def get_catalog(store: MovieRepository = Depends(get_movie_store)) -> MovieCatalog:
    """Catalog bound to the injected store."""
    return MovieCatalog(store)


async def get_json_body(request: Request) -> Any:
    """
    Parsed JSON request body.

    An empty body gives None. A body that is not valid JSON gives an
    Invalid carrying a single violation on the body, which the catalog
    reports in the same shape as any other validation failure.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.debug(f"Undecodable request body: {e}")
        return Invalid((Violation(field=ROOT_FIELD, reason=f"Invalid JSON: {e}"),))
