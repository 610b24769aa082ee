"""
Pydantic schemas for Movie API responses.
"""

from pydantic import BaseModel, Field

from movie_catalog.core.catalog.models import Genre


class MovieResponse(BaseModel):
    """Response model for a single movie. `rate` is omitted when unrated."""

    id: str
    title: str
    year: int
    director: str
    duration: int | float
    poster: str
    genre: list[Genre]
    rate: int | float | None = None


class ValidationErrorResponse(BaseModel):
    """Body of 400/422 responses: field path to list of reasons."""

    detail: dict[str, list[str]] = Field(..., examples=[{"year": ["Input should be less than or equal to 2025"]}])


class NotFoundResponse(BaseModel):
    """Body of 404 responses."""

    detail: str
