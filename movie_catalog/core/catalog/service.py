"""
Catalog request handlers.

Orchestrates validation and the record store for each operation and
reports the outcome as a value: `Found`, `NotFound` or `Invalid`.
"""

import logging
import uuid
from typing import Any, Callable, List, Optional, Union

from movie_catalog.core.catalog.errors import Found, Invalid, NotFound
from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.store import MovieRepository
from movie_catalog.core.catalog.validator import validate_full, validate_partial

logger = logging.getLogger(__name__)

MovieOutcome = Union[Found, NotFound, Invalid]


def generate_movie_id() -> str:
    """New random UUID4 string."""
    return str(uuid.uuid4())


class MovieCatalog:
    """
    High-level movie operations over a `MovieRepository`.

    Usage:
        catalog = MovieCatalog(InMemoryMovieStore())
        outcome = catalog.create_movie(payload)
        if isinstance(outcome, Invalid):
            ...
    """

    def __init__(
        self,
        store: MovieRepository,
        id_factory: Callable[[], str] = generate_movie_id,
    ):
        """
        Initialize the catalog.

        Args:
            store: Repository owning the movie records
            id_factory: Callable returning a fresh unique id per created movie
        """
        self.store = store
        self.id_factory = id_factory

    def list_movies(
        self,
        genre: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Union[List[Movie], Movie, None]:
        """
        List movies, applying at most one filter.

        `genre` wins when both are given and yields a list. `search` is an
        exact, case-insensitive title lookup and yields a single movie or
        None rather than a list.

        Args:
            genre: Genre label to filter by
            search: Title to look up

        Returns:
            List of movies, or a single movie / None for title search
        """
        if genre:
            return self.store.filter_by_genre(genre)
        if search:
            return self.store.find_by_title(search)
        return self.store.list()

    def get_movie(self, movie_id: str) -> Union[Found, NotFound]:
        """Look up a movie by id."""
        movie = self.store.find_by_id(movie_id)
        if movie is None:
            return NotFound()
        return Found(movie)

    def create_movie(self, payload: Any) -> Union[Found, Invalid]:
        """
        Validate a full payload and store it as a new movie.

        Args:
            payload: Parsed request body

        Returns:
            Found with the created movie, or Invalid with every violation
        """
        result = validate_full(payload)
        if isinstance(result, Invalid):
            logger.info(f"Create rejected: {result.fields}")
            return result

        movie = Movie(id=self.id_factory(), **result.data)
        self.store.append(movie)
        logger.info(f"Created movie {movie.id} ({movie.title!r})")
        return Found(movie)

    def update_movie(self, movie_id: str, payload: Any) -> MovieOutcome:
        """
        Partially update an existing movie.

        The id lookup happens before validation, so an unknown id reports
        NotFound whatever the payload. Validated fields are merged over the
        stored record; fields missing from the payload and the id are kept.

        Args:
            movie_id: Id of the movie to update
            payload: Parsed request body with any subset of fields

        Returns:
            Found with the updated movie, NotFound, or Invalid
        """
        with self.store.transaction() as store:
            existing = store.find_by_id(movie_id)
            if existing is None:
                logger.info(f"Update skipped: movie {movie_id} not found")
                return NotFound()

            result = validate_partial(payload)
            if isinstance(result, Invalid):
                logger.info(f"Update of {movie_id} rejected: {result.fields}")
                return result

            updated = existing.merged(result.data)
            store.replace(movie_id, updated)

        logger.info(f"Updated movie {movie_id}: {sorted(result.data)}")
        return Found(updated)
