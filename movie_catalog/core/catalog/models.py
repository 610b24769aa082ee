"""
Movie record schema.

Field types are declared once as annotated aliases and shared by the
full-create, partial-update and stored record models, so both validation
modes apply identical per-field constraints.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union, get_args

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    TypeAdapter,
    ValidationError,
)

MIN_YEAR = 1950
MAX_YEAR = 2025
MIN_RATE = 0
MAX_RATE = 10

Genre = Literal["Action", "Adventure", "Drama", "Sci-fi", "Terror", "Horror", "Romance"]
GENRES = get_args(Genre)

_url_adapter = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    """Accept only absolute URLs, returning the text untouched."""
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url") from None
    # a host is required: file: and mailto: URLs are rejected
    if not url.host:
        raise ValueError("Invalid url")
    return value


def _check_number(value):
    """Accept ints and floats as given. Booleans and numeric strings are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a valid number")
    return value


def _check_positive(value):
    if value <= 0:
        raise ValueError("Input should be greater than 0")
    return value


def _check_rate_range(value):
    if not MIN_RATE <= value <= MAX_RATE:
        raise ValueError(f"Input should be between {MIN_RATE} and {MAX_RATE}")
    return value


Title = Annotated[str, Field(min_length=1)]
Director = Annotated[str, Field(min_length=1)]
Year = Annotated[int, Field(ge=MIN_YEAR, le=MAX_YEAR)]
# Numbers keep their JSON type, so 137 stays an int
Number = Annotated[Union[int, float], PlainValidator(_check_number)]
Duration = Annotated[Number, AfterValidator(_check_positive)]
Poster = Annotated[str, AfterValidator(_check_absolute_url)]
Genres = Annotated[List[Genre], Field(min_length=1)]
Rate = Annotated[Number, AfterValidator(_check_rate_range)]


class MovieCreate(BaseModel):
    """Full payload: everything but `rate` is required. Unknown keys (including `id`) are dropped."""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: Title
    year: Year
    director: Director
    duration: Duration
    poster: Poster
    genre: Genres
    rate: Rate = None


class MovieUpdate(BaseModel):
    """Partial payload: every field optional, `null` is still rejected."""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: Title = None
    year: Year = None
    director: Director = None
    duration: Duration = None
    poster: Poster = None
    genre: Genres = None
    rate: Rate = None


class Movie(MovieCreate):
    """
    A stored movie record.

    Immutable all the way down: genres are held as a tuple, and updates
    produce a new validated instance.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    id: str
    genre: Annotated[Tuple[Genre, ...], Field(min_length=1, strict=False)]
    rate: Optional[Rate] = None

    def merged(self, changes: dict) -> "Movie":
        """Return a copy with `changes` applied. `id` is never taken from changes."""
        fields = {key: value for key, value in changes.items() if key != "id"}
        return type(self).model_validate({**self.model_dump(), **fields})

    def to_dict(self) -> dict:
        """Serialize, leaving `rate` out when the movie is unrated."""
        return self.model_dump(mode="json", exclude_none=True)
