"""
Presence-tracking wrapper type.

PresenceField[T] records whether a field was supplied in a partial-update
document, so PATCH handlers can tell three states apart:

- PresenceField()            key absent        -> leave the target unchanged
- PresenceField.of(None)     key present, null -> clear the target field
- PresenceField.of(value)    key present       -> set the target field

Example:
    @presence_contract
    class PatchUserRequest(PatchModel):
        name: PresenceField[str] = PresenceField()
        bio: PresenceField[str | None] = PresenceField()

    if request.name.is_specified:
        user.name = request.name.unwrap()
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, get_args, get_origin

import attrs
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar('T')


@attrs.define(frozen=True, repr=False)
class PresenceField(Generic[T]):
    """
    Immutable value plus a flag recording whether it was explicitly supplied.

    The value is only meaningful when is_specified is True. An unspecified
    field always carries None.
    """

    # Keyword-only: build specified fields through of()
    _value: T | None = attrs.field(default=None, kw_only=True)
    _is_specified: bool = attrs.field(default=False, kw_only=True)

    def __attrs_post_init__(self) -> None:
        if not self._is_specified and self._value is not None:
            raise ValueError('An unspecified PresenceField cannot carry a value; use PresenceField.of(value)')

    @classmethod
    def of(cls, value: T | None) -> PresenceField[T]:
        """Wrap a bare value (None included) as a specified field."""
        return cls(value=value, is_specified=True)

    @classmethod
    def unspecified(cls) -> PresenceField[T]:
        return cls()

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def is_specified(self) -> bool:
        return self._is_specified

    def unwrap(self) -> T | None:
        """
        Return the wrapped value regardless of is_specified.

        Check is_specified first: an unspecified field unwraps to None, the same
        as a field explicitly set to null.
        """
        return self._value

    def value_or(self, default: T) -> T | None:
        """Return the value when specified, otherwise the given default."""
        return self._value if self._is_specified else default

    def __repr__(self) -> str:
        if not self._is_specified:
            return 'PresenceField.unspecified()'
        return f'PresenceField.of({self._value!r})'

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        # Global dispatch: the codec comes from the options of the serializer
        # currently building this schema.
        from presence.registry import resolve_codec

        return resolve_codec(source).__get_pydantic_core_schema__(source, handler)


def is_presence_field_type(field_type: Any) -> bool:
    """True iff field_type is PresenceField[X] with exactly one type argument."""
    return get_origin(field_type) is PresenceField and len(get_args(field_type)) == 1
