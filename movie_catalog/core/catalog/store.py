"""
Record store for movies.

The handlers only depend on the `MovieRepository` interface, so the
in-memory implementation can be swapped for another backend without
touching them.
"""

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator, Iterable, List, Optional

from movie_catalog.core.catalog.models import Movie

logger = logging.getLogger(__name__)


class MovieRepository(ABC):
    """Ordered collection of movie records."""

    @abstractmethod
    def list(self) -> List[Movie]:
        """All records in insertion order."""

    @abstractmethod
    def filter_by_genre(self, genre: str) -> List[Movie]:
        """Records having `genre` among their genres, ignoring case."""

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[Movie]:
        """First record whose title equals `title`, ignoring case."""

    @abstractmethod
    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        """Record with exactly this id."""

    @abstractmethod
    def append(self, movie: Movie) -> None:
        """Add a record at the end."""

    @abstractmethod
    def replace(self, movie_id: str, movie: Movie) -> bool:
        """Overwrite the record with this id. False when nothing matched."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""

    @contextmanager
    def transaction(self) -> Generator["MovieRepository", None, None]:
        """Scope in which a sequence of calls runs without interleaving."""
        yield self


class InMemoryMovieStore(MovieRepository):
    """
    Process-local movie store.

    Every operation takes a re-entrant lock. FastAPI serves sync endpoints
    from a thread pool, so read-modify-write sequences must hold the lock
    for their whole duration through `transaction()`.

    Usage:
        store = InMemoryMovieStore()
        with store.transaction():
            movie = store.find_by_id(movie_id)
            if movie:
                store.replace(movie_id, movie.merged(changes))
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])
        self._lock = threading.RLock()

    def list(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def filter_by_genre(self, genre: str) -> List[Movie]:
        wanted = genre.lower()
        with self._lock:
            return [
                movie for movie in self._movies
                if any(g.lower() == wanted for g in movie.genre)
            ]

    def find_by_title(self, title: str) -> Optional[Movie]:
        wanted = title.lower()
        with self._lock:
            return next((m for m in self._movies if m.title.lower() == wanted), None)

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            return next((m for m in self._movies if m.id == movie_id), None)

    def append(self, movie: Movie) -> None:
        with self._lock:
            self._movies.append(movie)

    def replace(self, movie_id: str, movie: Movie) -> bool:
        with self._lock:
            for index, existing in enumerate(self._movies):
                if existing.id == movie_id:
                    self._movies[index] = movie
                    return True
        logger.debug(f"replace: no movie with id {movie_id}")
        return False

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    @contextmanager
    def transaction(self) -> Generator["InMemoryMovieStore", None, None]:
        with self._lock:
            yield self
