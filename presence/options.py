"""
Serializer option set and the presence configuration entry point.

Usage:
    options = add_presence_support(SerializerOptions(indent=2))
    serializer = JsonSerializer(options)

add_presence_support() is idempotent: installing twice leaves exactly one
PresenceCodecFactory in the options. Options become read-only once a
JsonSerializer takes them; configure them during startup only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import attrs

from presence.codec import PresenceCodec
from presence.exceptions import MissingOptionsError, ReadOnlyOptionsError
from presence.registry import Converter, PresenceCodecFactory

if TYPE_CHECKING:
    from presence.config import PresenceSettings

logger = logging.getLogger(__name__)


@attrs.define
class SerializerOptions:
    """
    Configuration shared by every type a JsonSerializer handles.

    Attributes:
        indent: Indentation for serialized JSON (None = compact)
        by_alias: Serialize using field aliases
    """

    indent: int | None = None
    by_alias: bool = False
    _converters: list[Converter] = attrs.field(factory=list)
    _read_only: bool = attrs.field(default=False, init=False)
    _codecs: dict[Any, PresenceCodec[Any]] = attrs.field(factory=dict, init=False, repr=False)

    @classmethod
    def from_settings(cls, settings: PresenceSettings) -> SerializerOptions:
        return cls(indent=settings.JSON_INDENT, by_alias=settings.BY_ALIAS)

    @property
    def converters(self) -> tuple[Converter, ...]:
        return tuple(self._converters)

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def add_converter(self, converter: Converter) -> SerializerOptions:
        if self._read_only:
            raise ReadOnlyOptionsError()
        self._converters.append(converter)
        return self

    def make_read_only(self) -> None:
        if not self._read_only:
            logger.debug(f'SerializerOptions frozen with {len(self._converters)} converter(s)')
        self._read_only = True

    def codec_for(self, field_type: Any) -> PresenceCodec[Any] | None:
        """Return the codec of the first converter that handles field_type (memoized)."""
        codec = self._codecs.get(field_type)
        if codec is not None:
            return codec

        for converter in self._converters:
            if converter.can_handle(field_type):
                codec = converter.build(field_type)
                self._codecs[field_type] = codec
                return codec
        return None


def add_presence_support(options: SerializerOptions | None) -> SerializerOptions:
    """
    Install the PresenceCodecFactory into options, once.

    Args:
        options: The option set to configure

    Returns:
        The same options instance, for chaining

    Raises:
        MissingOptionsError: If options is None
        ReadOnlyOptionsError: If a serializer already uses options and the
            factory is not yet installed
    """
    if options is None:
        raise MissingOptionsError('options')

    # Match by kind, not by reference: any factory instance counts
    if any(isinstance(converter, PresenceCodecFactory) for converter in options.converters):
        logger.debug('PresenceCodecFactory already installed; skipping')
        return options

    options.add_converter(PresenceCodecFactory())
    logger.debug('Installed PresenceCodecFactory')
    return options
