"""Request Error Classification — maps framework validation errors onto the domain taxonomy.

Invariants:
    - Every framework error becomes exactly one FieldViolation (none dropped)
    - Any structural failure (bad JSON, missing field, wrong type, bad UUID)
      makes the whole request MalformedRequestError
    - Only declared-constraint failures yield InputValidationError
    - Pure function of the error list: no IO, no logging

Design Decisions:
    - Classification by Pydantic error type: constraint types are an explicit
      allow-list, everything else counts as structural
"""

from collections.abc import Mapping, Sequence
from typing import Any

from todo_api.core.errors import (
    FieldViolation, InputValidationError, MalformedRequestError,
)

# Pydantic error types produced by declared field constraints.
# Email syntax failures (schemas/todo.py) surface as "value_error".
CONSTRAINT_ERROR_TYPES = frozenset({
    "string_too_short",
    "string_too_long",
    "value_error",
})

_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "cookie"})


def field_path(loc: Sequence[Any], error_type: str = "") -> str:
    """Dotted field path without the request-part prefix.

    ("query", "email") -> "email"; ("body",) -> "body";
    ("body", 17) for invalid JSON -> "body" (17 is a character offset).
    """
    parts = list(loc)
    root = str(parts[0]) if parts else "request"
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    if not parts or error_type == "json_invalid":
        return root
    return ".".join(str(p) for p in parts)


def to_violation(error: Mapping[str, Any]) -> FieldViolation:
    error_type = str(error.get("type", "unknown"))
    return FieldViolation(
        field=field_path(error.get("loc", ()), error_type),
        message=str(error.get("msg", "")),
        type=error_type,
    )


def is_constraint_error(error: Mapping[str, Any]) -> bool:
    return error.get("type") in CONSTRAINT_ERROR_TYPES


def classify_request_errors(
    errors: Sequence[Mapping[str, Any]],
) -> InputValidationError | MalformedRequestError:
    """Build the domain error for a rejected request.

    All violations are reported, including constraint failures that
    accompany a structural one.
    """
    violations = [to_violation(e) for e in errors]
    if errors and all(is_constraint_error(e) for e in errors):
        return InputValidationError(violations)
    return MalformedRequestError(violations)
