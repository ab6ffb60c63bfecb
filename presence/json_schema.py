"""
JSON Schema generation for models with PresenceField fields.

A wrapper field documents as its inner type or null. An unspecified default
means "key may be omitted", so it is left out of the schema instead of being
rendered as a value; a specified default is rendered as its inner value.
"""

from __future__ import annotations

from typing import Any

from pydantic.json_schema import GenerateJsonSchema, NoDefault
from pydantic_core import core_schema

from presence.field import PresenceField


class PresenceJsonSchema(GenerateJsonSchema):
    """GenerateJsonSchema that understands PresenceField defaults."""

    def get_default_value(self, schema: core_schema.WithDefaultSchema) -> Any:
        default = super().get_default_value(schema)
        if isinstance(default, PresenceField):
            return default.unwrap() if default.is_specified else NoDefault
        return default
