"""
Pydantic schemas for API responses.
"""

from movie_catalog.api.models.movie import MovieResponse, NotFoundResponse, ValidationErrorResponse

__all__ = [
    "MovieResponse",
    "NotFoundResponse",
    "ValidationErrorResponse",
]
