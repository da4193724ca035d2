"""
Schema normalization.

This module converts heterogeneous schema entries (bare type tags or
descriptor mappings) into canonical SchemaDescriptor instances. It never
rejects an entry: unsupported type tags are reported by the engine.
"""

import builtins
import inspect
import typing
from typing import Any, Dict, Mapping, Union

from ..models import SchemaDescriptor

SchemaEntry = Union[Any, Mapping[str, Any], SchemaDescriptor]
Schema = Union[Mapping[str, SchemaEntry], type]


def is_required(flag: Any) -> bool:
    """A key is required unless its descriptor sets required to exactly False."""
    return flag is not False


def normalize_entry(entry: SchemaEntry) -> SchemaDescriptor:
    """
    Normalize one schema entry.

    Args:
        entry: A bare type tag, a descriptor mapping with ``type`` and optional
            ``required``/``default`` keys, or an existing SchemaDescriptor

    Returns:
        The canonical descriptor
    """
    if isinstance(entry, SchemaDescriptor):
        return entry

    if isinstance(entry, Mapping):
        return SchemaDescriptor(
            type=entry.get("type"),
            required=is_required(entry.get("required")),
            default=entry.get("default"),
        )

    return SchemaDescriptor(type=entry, required=True)


def normalize_schema(schema: Schema) -> Dict[str, SchemaDescriptor]:
    """
    Normalize a whole schema, preserving key order.

    Classes are accepted as schemas: each annotated attribute becomes a key.
    An attribute without a value is a required bare tag; an attribute with a
    value is optional and uses that value as its default.

    Args:
        schema: Mapping of key to schema entry, or an annotated class

    Returns:
        Mapping of key to SchemaDescriptor
    """
    if isinstance(schema, type):
        return _normalize_class_schema(schema)

    return {key: normalize_entry(entry) for key, entry in schema.items()}


def _class_annotations(schema_cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(schema_cls)
    except (NameError, TypeError):
        # Unresolvable forward references stay as raw strings and are
        # reported as unsupported types by the engine
        if hasattr(inspect, "get_annotations"):
            annotations = inspect.get_annotations(schema_cls)
        else:
            annotations = schema_cls.__dict__.get("__annotations__", {})
        return {
            key: getattr(builtins, hint, hint) if isinstance(hint, str) else hint
            for key, hint in annotations.items()
        }


def _normalize_class_schema(schema_cls: type) -> Dict[str, SchemaDescriptor]:
    normalized: Dict[str, SchemaDescriptor] = {}
    for key, hint in _class_annotations(schema_cls).items():
        if hasattr(schema_cls, key):
            normalized[key] = SchemaDescriptor(
                type=hint, required=False, default=getattr(schema_cls, key)
            )
        else:
            normalized[key] = SchemaDescriptor(type=hint, required=True)
    return normalized
