"""Exceptions raised while *configuring* validation.

Problems found while validating a record never raise: they are reported
through the error mapping returned by the engine.
"""


class StructCheckError(Exception):
    """Base class for all structcheck errors."""


class RegistryError(StructCheckError):
    """A validator could not be registered under the given name."""


class RuleSpecError(StructCheckError, ValueError):
    """A validator factory received arguments it cannot build a rule from."""
