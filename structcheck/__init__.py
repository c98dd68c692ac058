"""structcheck — rule-driven validation of dataclass and pydantic record fields.

Usage:
    from dataclasses import dataclass
    from structcheck import rules
    from structcheck.validators import default_registry

    @dataclass
    class Signup:
        email: str = rules("nonempty,email")
        password: str = rules("password", name="pass")

    errors = default_registry().validate(Signup(email="x", password="y"))
    if errors:
        # {"email": "invalid email", "pass": "invalid password"}
"""

from structcheck.config import Settings, get_settings
from structcheck.engine import ValidationEngine, validate
from structcheck.exceptions import RegistryError, RuleSpecError, StructCheckError
from structcheck.fields import describe, is_record, parse_rules, rules
from structcheck.log import configure_logging
from structcheck.models import (
    STRUCT_RULE,
    ErrorMapping,
    FieldDescriptor,
    SelfValidating,
    ValidatorFn,
    ValueMapper,
)
from structcheck.registry import Registry

__version__ = "0.1.0"

__all__ = [
    "STRUCT_RULE",
    "ErrorMapping",
    "FieldDescriptor",
    "Registry",
    "RegistryError",
    "RuleSpecError",
    "SelfValidating",
    "Settings",
    "StructCheckError",
    "ValidationEngine",
    "ValidatorFn",
    "ValueMapper",
    "configure_logging",
    "describe",
    "get_settings",
    "is_record",
    "parse_rules",
    "rules",
    "validate",
]
