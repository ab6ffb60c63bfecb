"""
Introspection utilities for presence-tracking aggregates.

Finds PresenceField fields on pydantic models and dataclasses, and applies the
specified values of a decoded patch onto a target record.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter

from presence.exceptions import PatchTargetError
from presence.field import PresenceField, is_presence_field_type


def is_presence_annotation(annotation: Any) -> bool:
    """
    Check if annotation is a PresenceField[T], handling wrappers around it.

    Handles Annotated metadata, Python 3.12+ type aliases and unions
    (e.g. PresenceField[str] | None).
    """
    if is_presence_field_type(annotation):
        return True

    # Python 3.12+ type alias (__value__ attribute)
    if isinstance(annotation, typing.TypeAliasType):
        return is_presence_annotation(annotation.__value__)

    origin = get_origin(annotation)
    if origin is typing.Annotated:
        return is_presence_annotation(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        return any(is_presence_annotation(arg) for arg in get_args(annotation))

    return False


def get_presence_fields(aggregate_type: type) -> list[str]:
    """
    Find all fields typed as PresenceField[T].

    Args:
        aggregate_type: Pydantic model class or dataclass to inspect

    Returns:
        Field names in declaration order

    Example:
        >>> from presence.demo import PatchUserRequest
        >>> get_presence_fields(PatchUserRequest)
        ['name', 'email', 'bio', 'expires_on', 'is_active']
    """
    if isinstance(aggregate_type, type) and issubclass(aggregate_type, BaseModel):
        # Annotated metadata (e.g. a per-field PresenceCodec) is already split off into field_info.metadata
        return [
            name
            for name, field_info in aggregate_type.model_fields.items()
            if is_presence_annotation(field_info.annotation)
        ]

    if dataclasses.is_dataclass(aggregate_type):
        hints = typing.get_type_hints(aggregate_type, include_extras=True)
        return [field.name for field in dataclasses.fields(aggregate_type) if is_presence_annotation(hints[field.name])]

    raise TypeError(f'{aggregate_type!r} is not a pydantic model or dataclass')


def specified_values(aggregate: Any) -> dict[str, Any]:
    """
    Collect the values of all specified PresenceField fields.

    Unspecified fields are left out; fields specified as null map to None.
    """
    result = {}
    for name in get_presence_fields(type(aggregate)):
        field = getattr(aggregate, name)
        if isinstance(field, PresenceField) and field.is_specified:
            result[name] = field.unwrap()
    return result


def apply_specified[R](target: R, patch: Any) -> R:
    """
    Return a copy of target with the specified fields of patch applied.

    The merged values are validated against the target type, so a null sent for
    a required field fails instead of producing an invalid record.

    Args:
        target: Pydantic model instance or dataclass instance to update
        patch: Decoded patch aggregate with PresenceField fields

    Raises:
        PatchTargetError: If patch specifies a field that target does not define
        pydantic.ValidationError: If the patched values do not fit the target type
    """
    updates = specified_values(patch)

    if isinstance(target, BaseModel):
        current = {name: getattr(target, name) for name in type(target).model_fields}
    elif dataclasses.is_dataclass(target) and not isinstance(target, type):
        current = {field.name: getattr(target, field.name) for field in dataclasses.fields(target) if field.init}
    else:
        raise TypeError(f'{type(target).__name__} is not a pydantic model or dataclass instance')

    unknown = sorted(set(updates) - set(current))
    if unknown:
        raise PatchTargetError(type(target), unknown)

    if isinstance(target, BaseModel):
        return type(target).model_validate(current | updates, by_name=True)
    return TypeAdapter(type(target)).validate_python(current | updates, by_name=True)
