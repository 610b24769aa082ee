"""
Initial movie data loading.

The catalog starts from a JSON file holding a list of movie records, each
with its own `id` plus fields that must pass full validation.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from movie_catalog.core.catalog.errors import ConfigurationError, Invalid
from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.validator import validate_full

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[2] / "data" / "movies.json"


def load_seed_movies(path: Union[str, Path] = DEFAULT_SEED_PATH) -> List[Movie]:
    """
    Read and validate seed movies.

    Args:
        path: JSON file containing a list of movie objects

    Returns:
        List of Movie records in file order

    Raises:
        ConfigurationError: If the file is missing, not valid JSON, not a
            list, or any entry lacks a string id, repeats an id, or fails
            validation
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read seed file {path}: {e}") from e

    if not isinstance(raw, list):
        raise ConfigurationError(f"Seed file {path} must contain a JSON list")

    movies = []
    seen_ids = set()
    for position, entry in enumerate(raw):
        movie_id = entry.get("id") if isinstance(entry, dict) else None
        if not isinstance(movie_id, str) or not movie_id:
            raise ConfigurationError(f"Seed movie #{position} has no string id")
        if movie_id in seen_ids:
            raise ConfigurationError(f"Seed movie id {movie_id} is duplicated")

        result = validate_full(entry)
        if isinstance(result, Invalid):
            raise ConfigurationError(
                f"Seed movie {movie_id} is invalid: {result.as_dict()}"
            )
        seen_ids.add(movie_id)
        movies.append(Movie(id=movie_id, **result.data))

    logger.info(f"Loaded {len(movies)} seed movies from {path}")
    return movies
