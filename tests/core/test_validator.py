"""
Unit tests for movie payload validation.

Covers full (create) and partial (update) modes, the per-field
constraints, and aggregation of every violation in one pass.
"""

import pytest

from movie_catalog.core.catalog import Invalid, Valid, Violation, validate_full, validate_partial
from movie_catalog.core.catalog.validator import ROOT_FIELD


@pytest.fixture
def dune():
    """A valid full payload."""
    return {
        "title": "Dune",
        "year": 1984,
        "director": "D. Lynch",
        "duration": 137,
        "poster": "http://x.com/p.jpg",
        "genre": ["Sci-fi"],
    }


class TestValidateFull:
    """Tests for validate_full."""

    def test_valid_payload_round_trips(self, dune):
        """Accepted data equals the input fields and leaves rate absent."""
        result = validate_full(dune)

        assert isinstance(result, Valid)
        assert result.data == dune
        assert "rate" not in result.data

    def test_rate_kept_when_given(self, dune):
        """An in-range rate is returned."""
        result = validate_full({**dune, "rate": 7.5})

        assert isinstance(result, Valid)
        assert result.data["rate"] == 7.5

    def test_client_id_dropped(self, dune):
        """An id in the payload is never part of the validated data."""
        result = validate_full({**dune, "id": "client-id", "extra": 1})

        assert isinstance(result, Valid)
        assert "id" not in result.data
        assert "extra" not in result.data

    def test_duplicate_genres_kept(self, dune):
        """Genres are not deduplicated."""
        result = validate_full({**dune, "genre": ["Drama", "Drama", "Action"]})

        assert isinstance(result, Valid)
        assert result.data["genre"] == ["Drama", "Drama", "Action"]

    @pytest.mark.parametrize("year", [1800, 1949, 2026, 3000])
    def test_year_out_of_range(self, dune, year):
        """Years outside [1950, 2025] are rejected citing year."""
        result = validate_full({**dune, "year": year})

        assert isinstance(result, Invalid)
        assert result.fields == ["year"]

    @pytest.mark.parametrize("year", [1950, 2025])
    def test_year_bounds_inclusive(self, dune, year):
        """Both year bounds are accepted."""
        assert isinstance(validate_full({**dune, "year": year}), Valid)

    @pytest.mark.parametrize("year", ["1984", 1984.5, 1984.0, True])
    def test_year_must_be_integer(self, dune, year):
        """Strings, floats and booleans are not integers."""
        result = validate_full({**dune, "year": year})

        assert isinstance(result, Invalid)
        assert "year" in result.fields

    @pytest.mark.parametrize("field", ["title", "director"])
    def test_empty_text_rejected(self, dune, field):
        """Title and director must be non-empty."""
        result = validate_full({**dune, field: ""})

        assert isinstance(result, Invalid)
        assert result.fields == [field]

    @pytest.mark.parametrize("field", ["title", "director", "poster"])
    def test_text_fields_require_strings(self, dune, field):
        """Numbers are not coerced to text."""
        result = validate_full({**dune, field: 123})

        assert isinstance(result, Invalid)
        assert result.fields == [field]

    @pytest.mark.parametrize("duration", [0, -10, "137"])
    def test_duration_must_be_positive_number(self, dune, duration):
        """Duration must be a number strictly greater than zero."""
        result = validate_full({**dune, "duration": duration})

        assert isinstance(result, Invalid)
        assert result.fields == ["duration"]

    def test_numbers_keep_their_type(self, dune):
        """Integer duration and rate are not turned into floats."""
        result = validate_full({**dune, "rate": 8})

        assert isinstance(result, Valid)
        assert type(result.data["duration"]) is int
        assert type(result.data["rate"]) is int

    @pytest.mark.parametrize("duration", [True, None, [137]])
    def test_duration_rejects_non_numbers(self, dune, duration):
        """Booleans, null and lists are not numbers."""
        result = validate_full({**dune, "duration": duration})

        assert isinstance(result, Invalid)
        assert result.fields == ["duration"]

    def test_fractional_duration_accepted(self, dune):
        """Duration may be fractional."""
        result = validate_full({**dune, "duration": 90.5})

        assert isinstance(result, Valid)
        assert result.data["duration"] == 90.5

    @pytest.mark.parametrize("poster", ["file:///tmp/x.jpg", "mailto:a@b.com"])
    def test_poster_requires_host(self, dune, poster):
        """Absolute URLs without a host are rejected as posters."""
        result = validate_full({**dune, "poster": poster})

        assert isinstance(result, Invalid)
        assert result.fields == ["poster"]

    @pytest.mark.parametrize("poster", ["not a url", "x.com/p.jpg", "/images/p.jpg", ""])
    def test_poster_must_be_absolute_url(self, dune, poster):
        """Relative or malformed posters are rejected."""
        result = validate_full({**dune, "poster": poster})

        assert isinstance(result, Invalid)
        assert result.fields == ["poster"]

    def test_empty_genre_list_rejected(self, dune):
        """At least one genre is required."""
        result = validate_full({**dune, "genre": []})

        assert isinstance(result, Invalid)
        assert result.fields == ["genre"]

    def test_genre_must_be_list(self, dune):
        """A bare string is not a genre list."""
        result = validate_full({**dune, "genre": "Drama"})

        assert isinstance(result, Invalid)
        assert result.fields == ["genre"]

    def test_genre_labels_case_sensitive(self, dune):
        """Labels must match the enum exactly; the offending index is reported."""
        result = validate_full({**dune, "genre": ["Drama", "action", "Comedy"]})

        assert isinstance(result, Invalid)
        assert result.fields == ["genre.1", "genre.2"]

    @pytest.mark.parametrize("rate", [-0.1, 10.5, "9"])
    def test_rate_out_of_range_or_wrong_type(self, dune, rate):
        """Rate must be a number within [0, 10]."""
        result = validate_full({**dune, "rate": rate})

        assert isinstance(result, Invalid)
        assert result.fields == ["rate"]

    def test_null_rate_rejected(self, dune):
        """Null is not the same as leaving rate out."""
        result = validate_full({**dune, "rate": None})

        assert isinstance(result, Invalid)
        assert result.fields == ["rate"]

    def test_already_rejected_payload_passes_through(self):
        """A payload rejected before validation is returned unchanged."""
        rejected = Invalid((Violation(field=ROOT_FIELD, reason="Invalid JSON"),))

        assert validate_full(rejected) is rejected
        assert validate_partial(rejected).violations == rejected.violations

    def test_missing_required_fields(self):
        """Every missing required field is reported, but rate is not."""
        result = validate_full({})

        assert isinstance(result, Invalid)
        assert set(result.fields) == {"title", "year", "director", "duration", "poster", "genre"}
        assert result.as_dict()["title"] == ["Field required"]

    def test_all_violations_collected(self, dune):
        """Several bad fields are reported together."""
        result = validate_full({**dune, "year": 1800, "duration": -1, "genre": ["Comedy"]})

        assert isinstance(result, Invalid)
        assert set(result.fields) == {"year", "duration", "genre.0"}
        assert len(result.violations) == 3

    @pytest.mark.parametrize("payload", [None, [1, 2], "movie", 42])
    def test_non_object_payload(self, payload):
        """A payload that is not an object yields a single root violation."""
        result = validate_full(payload)

        assert isinstance(result, Invalid)
        assert result.fields == [ROOT_FIELD]


class TestValidatePartial:
    """Tests for validate_partial."""

    def test_empty_payload_valid(self):
        """No fields is a valid (empty) update."""
        result = validate_partial({})

        assert isinstance(result, Valid)
        assert result.data == {}

    def test_only_present_fields_returned(self):
        """Absent fields are not filled with defaults."""
        result = validate_partial({"title": "Dune: Part One", "rate": 8})

        assert isinstance(result, Valid)
        assert result.data == {"title": "Dune: Part One", "rate": 8}

    def test_id_never_returned(self):
        """A client id is dropped from the update."""
        result = validate_partial({"id": "attacker-id"})

        assert isinstance(result, Valid)
        assert result.data == {}

    def test_present_fields_use_full_constraints(self):
        """The same per-field rules as creation apply."""
        result = validate_partial({"year": 1800, "title": "", "genre": ["action"]})

        assert isinstance(result, Invalid)
        assert set(result.fields) == {"year", "title", "genre.0"}

    def test_null_field_rejected(self):
        """Explicit null does not mean absent."""
        result = validate_partial({"director": None})

        assert isinstance(result, Invalid)
        assert result.fields == ["director"]

    def test_invalid_reports_passing_subset(self):
        """The fields that did validate are reported alongside violations."""
        result = validate_partial({"title": "Dune", "year": 1800, "id": "x"})

        assert isinstance(result, Invalid)
        assert result.fields == ["year"]
        assert result.valid == {"title": "Dune"}

    def test_non_object_payload(self):
        """A list body is rejected with no passing subset."""
        result = validate_partial(["title"])

        assert isinstance(result, Invalid)
        assert result.fields == [ROOT_FIELD]
        assert result.valid == {}
