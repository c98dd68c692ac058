"""Reusable validator library.

Usage:
    from structcheck.validators import default_registry

    registry = default_registry()
    registry["strlimit-3-8"] = str_limit(3, 8)
"""

from structcheck.registry import Registry
from structcheck.validators.basic import nonempty, nonnegative, notnull
from structcheck.validators.credentials import EMAIL_PATTERN, email, password
from structcheck.validators.strings import re_match, str_limit

# (min, max) pairs registered as "strlimit-<min>-<max>"
STR_LIMIT_PRESETS: list[tuple[int, int]] = [
    (2, 2),
    (1, 20),
    (1, 128),
    (1, 256),
    (1, 512),
    (1, 1024),
    (0, 20),
    (0, 256),
    (0, 512),
    (0, 1024),
    (0, 2048),
]


def default_registry() -> Registry:
    """Build a fresh registry holding the whole library.

    A new instance per call, so callers can extend theirs without affecting
    anyone else's.
    """
    registry = Registry({
        "nonnegative": nonnegative,
        "nonempty": nonempty,
        "notnull": notnull,
        "email": email,
        "password": password,
    })
    for min_len, max_len in STR_LIMIT_PRESETS:
        registry[f"strlimit-{min_len}-{max_len}"] = str_limit(min_len, max_len)
    return registry


__all__ = [
    "EMAIL_PATTERN",
    "STR_LIMIT_PRESETS",
    "default_registry",
    "email",
    "nonempty",
    "nonnegative",
    "notnull",
    "password",
    "re_match",
    "str_limit",
]
