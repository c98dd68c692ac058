"""String validators — length limits and pattern matching.

Both factories accept a single string (or bytes) and also a list of strings;
for lists each element is checked and the failures are returned per index.
"""

import re
from typing import Any, Optional, Union

from structcheck.exceptions import RuleSpecError
from structcheck.models import ValidatorFn

NOT_STRING_OR_BYTES = "Should be a string or byte array"
UNSUPPORTED_TYPE = "Unsupported type"


def _is_str_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


def _char_count(value: Union[str, bytes]) -> int:
    if isinstance(value, bytes):
        return len(value.decode("utf-8", errors="replace"))
    return len(value)


def str_limit(min_len: int, max_len: int) -> ValidatorFn:
    """Build a validator limiting a string's length (in characters) to [min_len, max_len].

    Args:
        min_len: Minimum length, inclusive
        max_len: Maximum length, inclusive

    Returns:
        Validator returning "Minimum length is N" / "Maximum length is N",
        or ``{index: error}`` for a list of strings.

    Raises:
        RuleSpecError: If the bounds are negative or inverted
    """
    if min_len < 0 or max_len < 0:
        raise RuleSpecError(f"Length limits must be nonnegative, got: {min_len}-{max_len}")
    if min_len > max_len:
        raise RuleSpecError(f"Minimum length {min_len} exceeds maximum {max_len}")

    min_err = f"Minimum length is {min_len}"
    max_err = f"Maximum length is {max_len}"

    def check(length: int) -> Optional[str]:
        if length < min_len:
            return min_err
        if length > max_len:
            return max_err
        return None

    def validator(value: Any) -> Any:
        if isinstance(value, (str, bytes)):
            return check(_char_count(value))
        if _is_str_list(value):
            errors = {}
            for i, item in enumerate(value):
                error = check(len(item))
                if error is not None:
                    errors[i] = error
            return errors or None
        return NOT_STRING_OR_BYTES

    validator.__name__ = f"str_limit_{min_len}_{max_len}"
    return validator


def re_match(pattern: str, mismatch_error: Any = None) -> ValidatorFn:
    """Build a validator requiring a match of ``pattern`` somewhere in the value.

    Args:
        pattern: Regular expression; anchor it with ^...$ for a full match
        mismatch_error: Payload returned on mismatch. Defaults to
            "Value should match the pattern: <pattern>".

    Returns:
        Validator; for a list of strings it returns a list aligned with the
        input holding None for matching items, or None if all match.

    Raises:
        RuleSpecError: If the pattern does not compile
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise RuleSpecError(f"Invalid pattern {pattern!r}: {e}") from e

    if mismatch_error is None:
        mismatch_error = f"Value should match the pattern: {pattern}"

    def validator(value: Any) -> Any:
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if isinstance(value, str):
            return None if compiled.search(value) else mismatch_error
        if _is_str_list(value):
            errors = [None if compiled.search(item) else mismatch_error for item in value]
            if any(error is not None for error in errors):
                return errors
            return None
        return UNSUPPORTED_TYPE

    validator.__name__ = "re_match"
    return validator
