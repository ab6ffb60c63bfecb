"""
Decode/encode algorithm for one concrete PresenceField[T].

PresenceCodec(T) plugs into pydantic as a schema provider. It can be used in
two ways:

1. Per field, as Annotated metadata. No registration is needed:

    class PatchPrimitivesRequest(BaseModel):
        name: Annotated[PresenceField[str], PresenceCodec(str)] = PresenceField()

2. As the codec returned by PresenceCodecFactory (or registered directly as a
   converter) when SerializerOptions resolve a bare PresenceField[T].

Decoding only ever runs for keys that are present in the document: pydantic
uses the field default (PresenceField(), unspecified) for absent keys.

Serialization limitation: an unspecified field encodes as null, which decodes
back as PresenceField.of(None). "Not specified" and "specified as null" cannot
be told apart after a round trip.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar, get_args

import attrs
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from presence.exceptions import UnsupportedFieldTypeError
from presence.field import PresenceField, is_presence_field_type

T = TypeVar('T')


@attrs.define(frozen=True)
class PresenceCodec(Generic[T]):
    """Presence codec specialized for one inner type T."""

    value_type: Any

    def can_handle(self, field_type: Any) -> bool:
        return is_presence_field_type(field_type) and get_args(field_type)[0] == self.value_type

    def build(self, field_type: Any) -> PresenceCodec[T]:
        if not self.can_handle(field_type):
            raise UnsupportedFieldTypeError(field_type, expected=f'PresenceField[{self.value_type!r}]')
        return self

    def decode(self, value: Any, decode_value: Callable[[Any], T]) -> PresenceField[T]:
        """
        Decode a present key into a specified PresenceField.

        Args:
            value: The raw value for the key (None for a JSON null)
            decode_value: Host routine that decodes a non-null raw value into T

        Returns:
            A specified PresenceField, or the input unchanged if it is an
            unspecified PresenceField (Python-mode construction)
        """
        if isinstance(value, PresenceField):
            if not value.is_specified:
                return value
            value = value.unwrap()

        # Explicit null: T is never parsed from a null token
        if value is None:
            return PresenceField.of(None)

        return PresenceField.of(decode_value(value))

    def encode(self, field: PresenceField[T], encode_value: Callable[[Any], Any]) -> Any:
        """
        Encode a PresenceField.

        Unspecified encodes as null (lossy, see module docstring). Specified
        delegates to the host encoder for T | None, even when the value is None.
        """
        if not field.is_specified:
            return None
        return encode_value(field.unwrap())

    def __get_pydantic_core_schema__(self, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        self.build(source)

        # Two separate schema objects: pydantic may inline definition refs in place
        validation_schema = core_schema.nullable_schema(handler.generate_schema(self.value_type))
        serialization_schema = core_schema.nullable_schema(handler.generate_schema(self.value_type))

        return core_schema.no_info_wrap_validator_function(
            self.decode,
            validation_schema,
            serialization=core_schema.wrap_serializer_function_ser_schema(
                self.encode,
                schema=serialization_schema,
                when_used='always',
            ),
        )
