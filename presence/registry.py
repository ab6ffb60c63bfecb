"""
Codec registry: maps PresenceField[T] annotations to their codecs.

Layering:
- PresenceCodecFactory builds a PresenceCodec for any PresenceField[T]
- SerializerOptions hold the installed converters and memoize built codecs
- codec_scope() exposes one SerializerOptions to schema hooks while a
  JsonSerializer builds a TypeAdapter; resolve_codec() reads it

Resolution happens once per concrete field type at schema-build time, never
per document.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Protocol, get_args

import attrs

from presence.codec import PresenceCodec
from presence.exceptions import CodecNotRegisteredError, UnsupportedFieldTypeError
from presence.field import is_presence_field_type

if TYPE_CHECKING:
    from presence.options import SerializerOptions

logger = logging.getLogger(__name__)

_active_options: ContextVar[SerializerOptions | None] = ContextVar('presence_active_options', default=None)


class Converter(Protocol):
    """Anything that can be installed in SerializerOptions.converters."""

    def can_handle(self, field_type: Any) -> bool: ...
    def build(self, field_type: Any) -> PresenceCodec[Any]: ...


@attrs.define(frozen=True)
class PresenceCodecFactory:
    """
    Builds a PresenceCodec for any PresenceField[T], whatever T is.

    Install once with add_presence_support(options); every bare
    PresenceField[T] annotation built through those options is then handled
    without per-field declarations.
    """

    def can_handle(self, field_type: Any) -> bool:
        return is_presence_field_type(field_type)

    def build(self, field_type: Any) -> PresenceCodec[Any]:
        if not self.can_handle(field_type):
            raise UnsupportedFieldTypeError(field_type)

        (value_type,) = get_args(field_type)
        logger.debug(f'Building presence codec for {field_type!r}')
        return PresenceCodec(value_type)


@contextlib.contextmanager
def codec_scope(options: SerializerOptions) -> Iterator[SerializerOptions]:
    """Make options visible to resolve_codec() for the duration of a schema build."""
    token = _active_options.set(options)
    try:
        yield options
    finally:
        _active_options.reset(token)


def active_options() -> SerializerOptions | None:
    return _active_options.get()


def resolve_codec(field_type: Any) -> PresenceCodec[Any]:
    """
    Find the codec for a PresenceField[T] annotation.

    Raises:
        CodecNotRegisteredError: If no build scope is active, or its options
            have no converter for field_type
        UnsupportedFieldTypeError: If field_type is not PresenceField[T]
    """
    if not is_presence_field_type(field_type):
        raise UnsupportedFieldTypeError(field_type)

    options = active_options()
    if options is None:
        raise CodecNotRegisteredError(field_type, scoped=False)

    codec = options.codec_for(field_type)
    if codec is None:
        raise CodecNotRegisteredError(field_type, scoped=True)
    return codec
