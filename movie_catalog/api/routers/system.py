"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from movie_catalog.api.dependencies import get_movie_store
from movie_catalog.core.catalog import MovieRepository

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(store: MovieRepository = Depends(get_movie_store)):
    """Health check: store reachable and its size."""
    return {
        "status": "healthy",
        "movies": store.count(),
    }
