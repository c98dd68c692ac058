"""Validator Registry — named validator functions looked up by the engine.

Usage:
    registry = Registry({"nonzero": nonzero})

    @registry.register("odd")
    def odd(value):
        return None if value & 1 else f"{value} is not odd"

    errors = registry.validate(record)
"""

from typing import Any, Callable, Mapping, Optional

import structlog

from structcheck.config import Settings
from structcheck.engine import ValidationEngine
from structcheck.exceptions import RegistryError
from structcheck.models import STRUCT_RULE, ErrorMapping, ValidatorFn

logger = structlog.get_logger()


class Registry(dict):
    """Mapping of rule name → validator function.

    Build it once at startup and share it; the engine only ever reads from it.
    Registering a name twice replaces the earlier validator.
    """

    def __init__(self, validators: Optional[Mapping[str, ValidatorFn]] = None, **kwargs: ValidatorFn):
        super().__init__()
        self.update(validators or {}, **kwargs)

    def __setitem__(self, name: str, fn: ValidatorFn) -> None:
        if not isinstance(name, str) or not name:
            raise RegistryError(f"Rule name must be a non-empty string, got: {name!r}")
        if name == STRUCT_RULE:
            raise RegistryError(f'"{STRUCT_RULE}" is reserved for nested record validation')
        if "," in name:
            raise RegistryError(f"Rule name cannot contain a comma: {name!r}")
        if not callable(fn):
            raise RegistryError(f"Validator for {name!r} is not callable: {type(fn).__name__}")
        if name in self:
            logger.debug("validator_replaced", rule=name)
        super().__setitem__(name, fn)

    def update(self, *args: Any, **kwargs: ValidatorFn) -> None:
        # dict.update bypasses __setitem__
        for name, fn in dict(*args, **kwargs).items():
            self[name] = fn

    def setdefault(self, name: str, fn: ValidatorFn) -> ValidatorFn:
        if name not in self:
            self[name] = fn
        return self[name]

    def __ior__(self, other: Mapping[str, ValidatorFn]) -> "Registry":
        self.update(other)
        return self

    def __or__(self, other: Mapping[str, ValidatorFn]) -> "Registry":
        merged = self.copy()
        merged.update(other)
        return merged

    @classmethod
    def fromkeys(cls, names: Any, fn: Any = None) -> "Registry":
        registry = cls()
        for name in names:
            registry[name] = fn
        return registry

    def copy(self) -> "Registry":
        return Registry(self)

    def register(self, name: str) -> Callable[[ValidatorFn], ValidatorFn]:
        """Decorator form of ``registry[name] = fn``."""
        def decorator(fn: ValidatorFn) -> ValidatorFn:
            self[name] = fn
            return fn
        return decorator

    def lookup(self, name: str) -> Optional[ValidatorFn]:
        """Return the validator for ``name``, or None if it is not registered."""
        return self.get(name)

    def validate(self, record: Any, settings: Optional[Settings] = None) -> ErrorMapping:
        """Validate ``record`` against this registry. See ValidationEngine.validate."""
        return ValidationEngine(self, settings=settings).validate(record)

    def __repr__(self) -> str:
        return f"Registry({sorted(self)!r})"
