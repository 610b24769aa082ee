"""
Movie API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_catalog.api.dependencies import get_catalog, get_json_body
from movie_catalog.api.models.movie import MovieResponse, NotFoundResponse, ValidationErrorResponse
from movie_catalog.core.catalog import Invalid, MovieCatalog, NotFound

router = APIRouter(prefix="/movies", tags=["movies"])

# The body is read by get_json_body, so document it by hand
JSON_OBJECT_BODY = {
    "requestBody": {"content": {"application/json": {"schema": {"type": "object"}}}},
}


def _not_found(outcome: NotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=outcome.message)


def _rejected(outcome: Invalid, status_code: int) -> HTTPException:
    return HTTPException(status_code=status_code, detail=outcome.as_dict())


@router.get(
    "",
    response_model=list[MovieResponse] | MovieResponse | None,
    response_model_exclude_none=True,
)
def list_movies(
    genre: str | None = Query(None),
    search: str | None = Query(None),
    catalog: MovieCatalog = Depends(get_catalog),
):
    """
    List movies.

    `genre` filters case-insensitively and returns a list. `search` looks
    up one movie by exact title and returns it or null. `genre` wins when
    both are given.
    """
    return catalog.list_movies(genre=genre, search=search)


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses={404: {"model": NotFoundResponse}},
)
def get_movie(movie_id: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Get movie details by ID."""
    outcome = catalog.get_movie(movie_id)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome)
    return outcome.movie


@router.post(
    "",
    status_code=201,
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses={422: {"model": ValidationErrorResponse}},
    openapi_extra=JSON_OBJECT_BODY,
)
def create_movie(
    payload: Any = Depends(get_json_body),
    catalog: MovieCatalog = Depends(get_catalog),
):
    """Create a movie from a full payload. Any client-supplied id is ignored."""
    outcome = catalog.create_movie(payload)
    if isinstance(outcome, Invalid):
        raise _rejected(outcome, status_code=422)
    return outcome.movie


@router.patch(
    "/{movie_id}",
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": NotFoundResponse}},
    openapi_extra=JSON_OBJECT_BODY,
)
def update_movie(
    movie_id: str,
    payload: Any = Depends(get_json_body),
    catalog: MovieCatalog = Depends(get_catalog),
):
    """Partially update a movie. Unknown ids return 404 before the body is checked."""
    outcome = catalog.update_movie(movie_id, payload)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome)
    if isinstance(outcome, Invalid):
        raise _rejected(outcome, status_code=400)
    return outcome.movie
