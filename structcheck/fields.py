"""Field introspection — turns a record type into an ordered list of FieldDescriptors.

Two kinds of records are understood:

    * dataclasses, with rules and the external name in ``field(metadata=...)``
    * pydantic models, with rules in ``Field(json_schema_extra=...)`` and the
      external name taken from ``serialization_alias`` / ``alias``

Usage:
    @dataclass
    class Signup:
        email: str = rules("nonempty,email")
        nick: str = rules("strlimit-1-20", name="nickname")
"""

import dataclasses
from functools import lru_cache
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel

from structcheck.config import get_settings
from structcheck.models import FieldDescriptor


def is_record(value: Any) -> bool:
    """True for dataclass and pydantic model *instances* (not classes)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def parse_rules(rule_names: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """Split a comma-separated rule list into names, keeping order.

    Blank entries are dropped, so ``"a,,b"`` and ``"a, b"`` both mean ``("a", "b")``.
    """
    if not rule_names:
        return ()
    parts = rule_names.split(",") if isinstance(rule_names, str) else rule_names
    return tuple(name.strip() for name in parts if name and name.strip())


def _external_key(name: str, override: Optional[str], ignore_marker: str) -> str:
    if not override:
        return name
    # "z,omitempty" style annotations carry options after the name
    override = override.split(",", 1)[0].strip()
    if not override or override == ignore_marker:
        return name
    return override


def _dataclass_fields(
    cls: type, rules_key: str, name_key: str, ignore_marker: str
) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for f in dataclasses.fields(cls):
        descriptors.append(FieldDescriptor(
            name=f.name,
            key=_external_key(f.name, f.metadata.get(name_key), ignore_marker),
            rules=parse_rules(f.metadata.get(rules_key)),
            visible=not f.name.startswith("_"),
        ))
    return tuple(descriptors)


def _model_fields(cls: type, rules_key: str, ignore_marker: str) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        descriptors.append(FieldDescriptor(
            name=name,
            key=_external_key(name, info.serialization_alias or info.alias, ignore_marker),
            rules=parse_rules(extra.get(rules_key)),
            visible=not name.startswith("_"),
        ))
    return tuple(descriptors)


@lru_cache(maxsize=None)
def describe(
    cls: type,
    rules_key: str = "validate",
    name_key: str = "json",
    ignore_marker: str = "-",
) -> tuple[FieldDescriptor, ...]:
    """Describe a record type's fields in declaration order.

    Results are cached per (type, annotation keys), so the introspection cost
    is paid once per record type.

    Args:
        cls: A dataclass or pydantic model class
        rules_key: Annotation key holding the comma-separated rule names
        name_key: Dataclass metadata key holding the external name
        ignore_marker: External name value that means "use the declared name"

    Returns:
        Tuple of FieldDescriptor (empty for any other type)
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return _model_fields(cls, rules_key, ignore_marker)
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls, rules_key, name_key, ignore_marker)
    return ()


def rules(rule_names: Union[str, Iterable[str]], *, name: Optional[str] = None, **field_kwargs: Any) -> Any:
    """Build a dataclass field carrying rule names and an optional external name.

    Any other keyword (``default``, ``default_factory``, ``repr``...) is passed
    through to ``dataclasses.field``.
    """
    settings = get_settings()
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[settings.RULES_KEY] = rule_names if isinstance(rule_names, str) else ",".join(rule_names)
    if name is not None:
        metadata[settings.NAME_KEY] = name
    return dataclasses.field(metadata=metadata, **field_kwargs)
