"""Tests for codec resolution through SerializerOptions."""

from __future__ import annotations

import pytest

from presence.codec import PresenceCodec
from presence.exceptions import CodecNotRegisteredError, UnsupportedFieldTypeError
from presence.field import PresenceField
from presence.options import SerializerOptions, add_presence_support
from presence.registry import PresenceCodecFactory, active_options, codec_scope, resolve_codec


def test_factory_handles_any_presence_type() -> None:
    factory = PresenceCodecFactory()

    assert factory.can_handle(PresenceField[int])
    assert factory.can_handle(PresenceField[list[str] | None])
    assert not factory.can_handle(int)
    assert not factory.can_handle(PresenceField)


def test_factory_builds_codec_for_inner_type() -> None:
    codec = PresenceCodecFactory().build(PresenceField[int])

    assert codec == PresenceCodec(int)
    assert codec.can_handle(PresenceField[int])


def test_factory_build_rejects_other_types() -> None:
    with pytest.raises(UnsupportedFieldTypeError):
        PresenceCodecFactory().build(list[int])


def test_resolve_outside_scope() -> None:
    with pytest.raises(CodecNotRegisteredError) as exc_info:
        resolve_codec(PresenceField[int])

    assert exc_info.value.scoped is False


def test_resolve_without_factory() -> None:
    with codec_scope(SerializerOptions()), pytest.raises(CodecNotRegisteredError) as exc_info:
        resolve_codec(PresenceField[int])

    assert exc_info.value.scoped is True
    assert exc_info.value.field_type == PresenceField[int]


def test_resolve_with_factory() -> None:
    options = add_presence_support(SerializerOptions())

    with codec_scope(options):
        assert resolve_codec(PresenceField[str]) == PresenceCodec(str)


def test_resolve_rejects_non_presence_type() -> None:
    with codec_scope(add_presence_support(SerializerOptions())), pytest.raises(UnsupportedFieldTypeError):
        resolve_codec(str)


def test_scope_is_restored() -> None:
    outer = SerializerOptions()
    inner = SerializerOptions()

    assert active_options() is None
    with codec_scope(outer):
        with codec_scope(inner):
            assert active_options() is inner
        assert active_options() is outer
    assert active_options() is None


def test_codecs_are_memoized_per_type() -> None:
    options = add_presence_support(SerializerOptions())

    first = options.codec_for(PresenceField[int])

    assert options.codec_for(PresenceField[int]) is first
    assert options.codec_for(PresenceField[str]) is not first


def test_first_matching_converter_wins() -> None:
    specific = PresenceCodec(str)
    options = add_presence_support(SerializerOptions(converters=[specific]))

    assert options.codec_for(PresenceField[str]) is specific
    assert options.codec_for(PresenceField[int]) == PresenceCodec(int)


def test_no_converter_matches() -> None:
    options = SerializerOptions(converters=[PresenceCodec(str)])

    assert options.codec_for(PresenceField[int]) is None
