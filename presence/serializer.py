"""
JSON serializer facade over pydantic TypeAdapters.

JsonSerializer is the host serializer a consumer configures once at startup.
It builds one TypeAdapter per target type inside codec_scope(options), so that
bare PresenceField[T] annotations resolve through the installed converters,
and caches the adapters for reuse across documents and threads.

Example:
    serializer = JsonSerializer(add_presence_support(SerializerOptions()))
    request = serializer.deserialize('{"name": "Jane", "email": null}', PatchUserRequest)
    request.age.is_specified  # False
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter

from presence.json_schema import PresenceJsonSchema
from presence.options import SerializerOptions
from presence.registry import codec_scope

T = TypeVar('T')

logger = logging.getLogger(__name__)


class JsonSerializer:
    """Decode and encode documents using one fixed SerializerOptions."""

    def __init__(self, options: SerializerOptions | None = None) -> None:
        self.options = options if options is not None else SerializerOptions()
        self.options.make_read_only()
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def adapter(self, target_type: type[T]) -> TypeAdapter[T]:
        """
        Return the cached TypeAdapter for target_type, building it on first use.

        Raises:
            CodecNotRegisteredError: If target_type contains a PresenceField[T]
                that neither the options nor a per-field codec handle
        """
        adapter = self._adapters.get(target_type)
        if adapter is not None:
            return adapter

        with codec_scope(self.options):
            adapter = TypeAdapter(target_type)
            # Deferred models (PatchModel) only build their schema here
            if not adapter.pydantic_complete:
                adapter.rebuild(force=True, raise_errors=True)

        logger.debug(f'Built TypeAdapter for {target_type!r}')
        self._adapters[target_type] = adapter
        return adapter

    def prepare(self, *target_types: type[Any]) -> JsonSerializer:
        """Build adapters eagerly, surfacing configuration errors at startup."""
        for target_type in target_types:
            self.adapter(target_type)
        return self

    def deserialize(self, data: str | bytes, target_type: type[T]) -> T:
        return self.adapter(target_type).validate_json(data)

    def deserialize_python(self, data: Any, target_type: type[T]) -> T:
        """Decode an already-parsed document (dicts, lists, scalars)."""
        return self.adapter(target_type).validate_python(data)

    def serialize(self, value: Any, target_type: type[Any] | None = None) -> str:
        adapter = self.adapter(target_type if target_type is not None else type(value))
        return adapter.dump_json(value, indent=self.options.indent, by_alias=self.options.by_alias).decode()

    def to_jsonable(self, value: Any, target_type: type[Any] | None = None) -> Any:
        adapter = self.adapter(target_type if target_type is not None else type(value))
        return adapter.dump_python(value, mode='json', by_alias=self.options.by_alias)

    def json_schema(self, target_type: type[Any]) -> dict[str, Any]:
        return self.adapter(target_type).json_schema(by_alias=self.options.by_alias, schema_generator=PresenceJsonSchema)
