"""
Presence tracking for partial-update (PATCH) documents on pydantic.

Re-exports the public API:
- PresenceField: absent / null / value wrapper
- PresenceCodec: per-type codec, usable as Annotated metadata
- PresenceCodecFactory, SerializerOptions, add_presence_support: global registration
- JsonSerializer: host facade that builds pydantic adapters with the options
- presence_contract: documentation-only aggregate marker
"""

from __future__ import annotations

from presence.base_model import PatchModel
from presence.codec import PresenceCodec
from presence.exceptions import (
    CodecNotRegisteredError,
    MissingOptionsError,
    PatchTargetError,
    PresenceConfigurationError,
    PresenceError,
    ReadOnlyOptionsError,
    UnsupportedFieldTypeError,
)
from presence.field import PresenceField, is_presence_field_type
from presence.introspection import apply_specified, get_presence_fields, specified_values
from presence.markers import has_presence_contract, presence_contract
from presence.options import SerializerOptions, add_presence_support
from presence.registry import PresenceCodecFactory
from presence.serializer import JsonSerializer

__all__ = [
    'CodecNotRegisteredError',
    'JsonSerializer',
    'MissingOptionsError',
    'PatchModel',
    'PatchTargetError',
    'PresenceCodec',
    'PresenceCodecFactory',
    'PresenceConfigurationError',
    'PresenceError',
    'PresenceField',
    'ReadOnlyOptionsError',
    'SerializerOptions',
    'UnsupportedFieldTypeError',
    'add_presence_support',
    'apply_specified',
    'get_presence_fields',
    'has_presence_contract',
    'is_presence_field_type',
    'presence_contract',
    'specified_values',
]
