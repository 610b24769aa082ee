"""
Schema validation for movie payloads.

Both entry points return a result value instead of raising:
`Valid(data)` on success, `Invalid(violations)` listing every offending
field found in a single pass.
"""

import logging
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ValidationError

from movie_catalog.core.catalog.errors import Invalid, Valid, Violation
from movie_catalog.core.catalog.models import MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

# Field path reported when the payload itself is not an object
ROOT_FIELD = "body"

ValidationResult = Union[Valid, Invalid]


def _to_violations(exc: ValidationError) -> Tuple[Violation, ...]:
    """Flatten pydantic errors into (dotted field path, message) pairs."""
    return tuple(
        Violation(
            field=".".join(str(part) for part in error["loc"]) or ROOT_FIELD,
            reason=error["msg"],
        )
        for error in exc.errors()
    )


def _validate(schema: type, payload: Any) -> Union[BaseModel, Invalid]:
    # payload already rejected upstream, e.g. a body that was not JSON
    if isinstance(payload, Invalid):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        violations = _to_violations(e)
        logger.debug(f"{schema.__name__} rejected: {[v.field for v in violations]}")
        return Invalid(violations)


def validate_full(payload: Any) -> ValidationResult:
    """
    Validate a payload for creating a movie.

    Args:
        payload: Parsed request body (any JSON value)

    Returns:
        Valid with every required field (and `rate` only if supplied),
        or Invalid with all violations
    """
    result = _validate(MovieCreate, payload)
    if isinstance(result, Invalid):
        return result
    return Valid(result.model_dump(exclude_unset=True))


def validate_partial(payload: Any) -> ValidationResult:
    """
    Validate a payload for partially updating a movie.

    Only fields present in the payload are checked and returned; absent
    fields stay absent.

    Args:
        payload: Parsed request body (any JSON value)

    Returns:
        Valid with the present fields, or Invalid with the violations and
        the subset of present fields that passed
    """
    result = _validate(MovieUpdate, payload)
    if isinstance(result, Invalid):
        return Invalid(result.violations, valid=_passing_fields(payload, result))
    return Valid(result.model_dump(exclude_unset=True))


def _passing_fields(payload: Any, invalid: Invalid) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        return {}
    rejected = {violation.field.split(".")[0] for violation in invalid.violations}
    subset = {
        key: value
        for key, value in payload.items()
        if key in MovieUpdate.model_fields and key not in rejected
    }
    return MovieUpdate.model_validate(subset).model_dump(exclude_unset=True)
