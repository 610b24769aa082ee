"""
Outcome types and exceptions for catalog operations.

Expected failures (bad payloads, unknown ids) are returned as values so
callers can branch on them; only configuration problems are raised.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Violation:
    """A single field of a payload that failed its constraint."""

    field: str
    reason: str


@dataclass(frozen=True)
class Valid:
    """Successful validation carrying the typed field mapping."""

    data: Dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    """
    Failed validation.

    `valid` holds the present fields that did pass, which is only
    populated in partial mode.
    """

    violations: Tuple[Violation, ...]
    valid: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, List[str]]:
        """Group violation reasons by field path."""
        grouped: Dict[str, List[str]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.field, []).append(violation.reason)
        return grouped

    @property
    def fields(self) -> List[str]:
        return list(self.as_dict())


@dataclass(frozen=True)
class Found:
    """Operation succeeded and produced a record."""

    movie: Any


@dataclass(frozen=True)
class NotFound:
    """No record matched the lookup."""

    message: str = "Movie not found"


class ConfigurationError(Exception):
    """Raised at startup when settings or seed data are unusable."""
