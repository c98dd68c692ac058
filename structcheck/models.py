"""Validation models — field descriptors, capability protocols, and error constants.

Error payloads are deliberately untyped (``Any``): a validator may return a
string, an exception instance, a dict of sub-errors, a list aligned with its
input, or anything else. The engine only checks ``is not None``.
"""

from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, Field

# A validator takes the field value and returns None (pass) or an error payload.
ValidatorFn = Callable[[Any], Any]

# Field key → error payload. Empty means the record passed.
ErrorMapping = dict[str, Any]

# Reserved rule name: recurse into the field value instead of a registry lookup.
STRUCT_RULE = "struct"

UNDEFINED_VALIDATOR = 'undefined validator: "{name}"'
MAX_DEPTH_EXCEEDED = "maximum nesting depth {depth} exceeded"
VALIDATOR_FAILED = 'validator "{name}" failed: {error}'


class FieldDescriptor(BaseModel):
    """Engine-side view of one record field."""

    name: str = Field(description="Attribute name as declared on the record")
    key: str = Field(description="External key used in the error mapping")
    rules: tuple[str, ...] = Field(default=(), description="Rule names in declared order")
    visible: bool = Field(default=True, description="False for private (underscore) fields")

    model_config = {"frozen": True}


@runtime_checkable
class SelfValidating(Protocol):
    """A field value that validates itself instead of using declared rules."""

    def validate_self(self) -> Any:
        ...


@runtime_checkable
class ValueMapper(Protocol):
    """A field value that hands a substitute value to its validators."""

    def map_value(self) -> Any:
        ...
