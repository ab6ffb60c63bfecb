"""
Shared Pydantic base model for PATCH request aggregates.

Models whose PresenceField fields rely on global registration should inherit
from PatchModel and be decoded through a JsonSerializer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PatchModel(BaseModel):
    """
    Base model for partial-update documents.

    The schema lives on each JsonSerializer's TypeAdapter, never on the class.
    Decode, build and encode instances through the serializer:

        request = serializer.deserialize(data, PatchUserRequest)
        serializer.serialize(request)

    The model's own methods (model_validate_json, model_dump, model_dump_json
    and the constructor) raise CodecNotRegisteredError for bare PresenceField[T]
    fields. model_construct() works, without validation.
    """

    model_config = ConfigDict(
        extra='forbid',  # Raise error on unexpected fields
        frozen=True,  # Immutable (cannot modify after creation)
        defer_build=True,  # Schema is built by JsonSerializer, where converters are visible
    )
