"""Credential validators — email addresses and passwords."""

import re
from typing import Any, Optional

from structcheck.validators.strings import re_match

# Good enough for the vast majority of real addresses, not RFC 5322
ID_PATTERN = r"([0-9a-zA-Z][-0-9a-zA-Z.+_']*)?[0-9a-zA-Z_]"
DOMAIN_NAME_PATTERN = ID_PATTERN + r"\.[a-zA-Z]{2,10}"
EMAIL_PATTERN = "^" + ID_PATTERN + "@" + DOMAIN_NAME_PATTERN + r"\Z"

INVALID_EMAIL = "invalid email"
INVALID_PASSWORD = "invalid password"

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
PASSWORD_REQUIRED_CLASSES = (re.compile("[a-z]"), re.compile("[A-Z]"), re.compile("[0-9]"))

email = re_match(EMAIL_PATTERN, INVALID_EMAIL)


def password(value: Any) -> Optional[str]:
    """8-128 bytes of UTF-8 with at least one lowercase, one uppercase and one digit."""
    if not isinstance(value, str):
        return INVALID_PASSWORD
    if not PASSWORD_MIN_LENGTH <= len(value.encode("utf-8", errors="replace")) <= PASSWORD_MAX_LENGTH:
        return INVALID_PASSWORD
    if not all(required.search(value) for required in PASSWORD_REQUIRED_CLASSES):
        return INVALID_PASSWORD
    return None
