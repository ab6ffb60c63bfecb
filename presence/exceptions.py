"""
Shared exceptions for pydantic-presence.

Exception Hierarchy:
    PresenceError (base)
    ├── PresenceConfigurationError (raised at startup or schema-build time)
    │   ├── MissingOptionsError (entry point called without options)
    │   ├── UnsupportedFieldTypeError (type is not the PresenceField[T] a codec handles)
    │   ├── CodecNotRegisteredError (PresenceField[T] met with no codec available)
    │   └── ReadOnlyOptionsError (options changed after a serializer took them)
    └── PatchTargetError (patch names a field the target does not have)

Errors from decoding or encoding the inner value are pydantic's own
(ValidationError, PydanticSerializationError) and are never wrapped.
"""

from __future__ import annotations

from typing import Any


class PresenceError(Exception):
    """Base exception for all pydantic-presence errors."""


class PresenceConfigurationError(PresenceError):
    """Base exception for configuration failures. Never raised per document."""


class MissingOptionsError(PresenceConfigurationError):
    """Raised when the configuration entry point receives no options object."""

    def __init__(self, parameter: str = 'options') -> None:
        self.parameter = parameter
        super().__init__(f'{parameter} must be a SerializerOptions instance, got None')


class UnsupportedFieldTypeError(PresenceConfigurationError):
    """Raised when a codec or factory is asked to handle a type it cannot."""

    def __init__(self, field_type: Any, expected: str = 'PresenceField[T]') -> None:
        self.field_type = field_type
        self.expected = expected
        super().__init__(f'Cannot build a presence codec for {field_type!r}: expected {expected}')


class CodecNotRegisteredError(PresenceConfigurationError):
    """Raised when a PresenceField[T] annotation is built without any codec available."""

    def __init__(self, field_type: Any, *, scoped: bool) -> None:
        self.field_type = field_type
        self.scoped = scoped
        if scoped:
            reason = 'the active SerializerOptions have no converter that handles it'
        else:
            reason = 'it was built outside a JsonSerializer'
        super().__init__(
            f'No codec available for {field_type!r}: {reason}. '
            f'Call add_presence_support(options) and build through JsonSerializer(options), '
            f'or annotate the field as Annotated[PresenceField[T], PresenceCodec(T)].'
        )


class ReadOnlyOptionsError(PresenceConfigurationError):
    """Raised when SerializerOptions are modified after a serializer started using them."""

    def __init__(self) -> None:
        super().__init__('SerializerOptions are read-only once a JsonSerializer has been created from them')


class PatchTargetError(PresenceError):
    """Raised when a patch carries a specified field that the target does not define."""

    def __init__(self, target_type: type, field_names: list[str]) -> None:
        self.target_type = target_type
        self.field_names = field_names
        names = ', '.join(field_names)
        super().__init__(f'{target_type.__name__} has no field(s) named: {names}')
