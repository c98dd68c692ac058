"""Basic validators — integer sign, string presence, null checks."""

from typing import Any, Optional

NOT_INTEGER = "Should be an integer"
NEGATIVE = "Should be nonnegative"
NOT_STRING = "Should be a string"
EMPTY = "Should be nonempty"
NULL = "Expected non null pointer"


def nonnegative(value: Any) -> Optional[str]:
    """Integers must be >= 0. Floats, strings and bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return NOT_INTEGER
    if value < 0:
        return NEGATIVE
    return None


def nonempty(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return NOT_STRING
    if not value:
        return EMPTY
    return None


def notnull(value: Any) -> Optional[str]:
    # Empty containers are values, only None is null
    if value is None:
        return NULL
    return None
