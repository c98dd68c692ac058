"""Validation Engine — applies registered rules to a record's fields, collects errors.

This is the main entry point. For every visible field, in declaration order,
it runs the field's rules until the first failure and stores that failure
under the field's external key. Nested records are validated recursively
when a field lists the reserved ``struct`` rule.

Usage:
    engine = ValidationEngine(registry)
    errors = engine.validate(record)
    if errors:
        # {"email": "invalid email", "address": {"zip": "Should be nonempty"}}
"""

import time
from typing import Any, Mapping, Optional

import structlog

from structcheck.config import Settings, get_settings
from structcheck.fields import describe, is_record
from structcheck.models import (
    MAX_DEPTH_EXCEEDED,
    STRUCT_RULE,
    UNDEFINED_VALIDATOR,
    VALIDATOR_FAILED,
    ErrorMapping,
    FieldDescriptor,
    SelfValidating,
    ValidatorFn,
    ValueMapper,
)

logger = structlog.get_logger()


class ValidationEngine:
    """Validates records against a registry of named validator functions.

    Design principles:
        - Ordered: fields in declaration order, rules in listed order
        - First failure wins: a field's entry is its first failing rule's result
        - Local: every problem is reported per field, nothing aborts the call
        - Read-only: the registry is never modified
    """

    def __init__(self, registry: Mapping[str, ValidatorFn], settings: Optional[Settings] = None):
        """Initialize with a registry and optional settings.

        Args:
            registry: Rule name → validator function mapping
            settings: Optional settings override. If None, uses get_settings().
        """
        self.registry = registry
        self.settings = settings or get_settings()

    def validate(self, record: Any) -> ErrorMapping:
        """Validate a record and return its errors keyed by field.

        Args:
            record: Dataclass or pydantic model instance. Anything else passes.

        Returns:
            Field key → error payload; empty when the record is valid
        """
        start_time = time.perf_counter()

        errors = self._validate_record(record, depth=0)

        logger.debug(
            "validation_complete",
            record=type(record).__name__,
            passed=not errors,
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return errors

    def describe(self, record: Any) -> tuple[FieldDescriptor, ...]:
        """Field descriptors the engine would use for ``record``."""
        if not is_record(record):
            return ()
        return describe(
            type(record),
            self.settings.RULES_KEY,
            self.settings.NAME_KEY,
            self.settings.IGNORE_MARKER,
        )

    # ── Internals ──

    def _validate_record(self, record: Any, depth: int) -> ErrorMapping:
        errors: ErrorMapping = {}

        for descriptor in self.describe(record):
            if not descriptor.visible:
                continue
            error = self._validate_field(descriptor, getattr(record, descriptor.name), depth)
            if error is not None:
                errors[descriptor.key] = error

        return errors

    def _validate_field(self, descriptor: FieldDescriptor, raw: Any, depth: int) -> Any:
        """Run one field's rules. Returns its error payload or None."""
        # Hooks are instance methods; a class holding them is a plain value
        is_instance = not isinstance(raw, type)
        value = raw.map_value() if is_instance and isinstance(raw, ValueMapper) else raw

        # Self-validation replaces declared rules entirely
        if is_instance and isinstance(raw, SelfValidating):
            return raw.validate_self()

        for rule in descriptor.rules:
            if rule == STRUCT_RULE:
                nested = self._validate_nested(descriptor, value, depth)
                if nested:
                    return nested
                continue

            fn = self.registry.get(rule)
            if fn is None:
                logger.warning("undefined_validator", rule=rule, field=descriptor.name)
                return UNDEFINED_VALIDATOR.format(name=rule)

            error = self._call(rule, fn, value, descriptor)
            if error is not None:
                return error

        return None

    def _validate_nested(self, descriptor: FieldDescriptor, value: Any, depth: int) -> Any:
        if not is_record(value):
            return {}
        if depth >= self.settings.MAX_DEPTH:
            logger.warning(
                "max_depth_exceeded",
                field=descriptor.name,
                max_depth=self.settings.MAX_DEPTH,
            )
            return MAX_DEPTH_EXCEEDED.format(depth=self.settings.MAX_DEPTH)
        return self._validate_record(value, depth + 1)

    def _call(self, rule: str, fn: ValidatorFn, value: Any, descriptor: FieldDescriptor) -> Any:
        if not self.settings.CATCH_VALIDATOR_ERRORS:
            return fn(value)
        try:
            return fn(value)
        except Exception as e:
            logger.error(
                "validator_failed",
                rule=rule,
                field=descriptor.name,
                error=str(e),
            )
            # Reported like any other failure; sibling fields still run
            return VALIDATOR_FAILED.format(name=rule, error=e)


def validate(record: Any, registry: Mapping[str, ValidatorFn], settings: Optional[Settings] = None) -> ErrorMapping:
    """Validate ``record`` against ``registry``. Shorthand for ValidationEngine(...).validate()."""
    return ValidationEngine(registry, settings=settings).validate(record)
