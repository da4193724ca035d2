#!/usr/bin/env python3
"""
Schema Models

This module contains the canonical per-key schema descriptor and the
supported field types that descriptors resolve to.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class FieldType(str, Enum):
    """Primitive types a configuration key may declare."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


# Python builtins accepted as bare type tags
_BUILTIN_TAGS = {
    str: FieldType.STRING,
    int: FieldType.NUMBER,
    float: FieldType.NUMBER,
    bool: FieldType.BOOLEAN,
}


def resolve_field_type(tag: Any) -> Optional[FieldType]:
    """
    Resolve a schema type tag to a supported FieldType.

    Accepts FieldType members, the builtins str/int/float/bool, and the
    case-insensitive names "string", "number" and "boolean".

    Args:
        tag: Raw type tag taken from a schema entry

    Returns:
        The matching FieldType, or None when the tag is not supported
    """
    if isinstance(tag, FieldType):
        return tag
    if isinstance(tag, str):
        try:
            return FieldType(tag.strip().lower())
        except ValueError:
            return None
    try:
        return _BUILTIN_TAGS.get(tag)
    except TypeError:
        # Unhashable tags (lists, dicts) are simply unsupported
        return None


class SchemaDescriptor(BaseModel):
    """
    Canonical description of one configuration key.

    Attributes:
        type: Raw type tag as authored; resolved by the engine
        required: Whether the key must be provided
        default: Value used when an optional key is missing (None = no default)
    """

    type: Any = None
    required: bool = True
    default: Any = None

    model_config = {
        "frozen": True,
    }

    @property
    def field_type(self) -> Optional[FieldType]:
        """Supported FieldType for this descriptor, or None."""
        return resolve_field_type(self.type)

    @property
    def has_default(self) -> bool:
        """Whether an applicable default was supplied."""
        return not self.required and self.default is not None
