"""
Movie catalog core.

This package contains:
- The movie record schema and its full/partial validators
- The record store interface and its in-memory implementation
- The request handlers orchestrating both
- Seed data loading
"""

from movie_catalog.core.catalog.errors import (
    ConfigurationError,
    Found,
    Invalid,
    NotFound,
    Valid,
    Violation,
)
from movie_catalog.core.catalog.models import GENRES, Movie, MovieCreate, MovieUpdate
from movie_catalog.core.catalog.seed import load_seed_movies
from movie_catalog.core.catalog.service import MovieCatalog
from movie_catalog.core.catalog.store import InMemoryMovieStore, MovieRepository
from movie_catalog.core.catalog.validator import validate_full, validate_partial

__all__ = [
    'ConfigurationError',
    'Found',
    'Invalid',
    'NotFound',
    'Valid',
    'Violation',
    'GENRES',
    'Movie',
    'MovieCreate',
    'MovieUpdate',
    'load_seed_movies',
    'MovieCatalog',
    'InMemoryMovieStore',
    'MovieRepository',
    'validate_full',
    'validate_partial',
]
