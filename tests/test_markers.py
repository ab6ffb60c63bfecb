"""Tests for the @presence_contract marker."""

from __future__ import annotations

import pytest

from presence.demo import PatchPrimitivesRequest, PatchUserRequest
from presence.exceptions import CodecNotRegisteredError
from presence.field import PresenceField
from presence.markers import PRESENCE_CONTRACT_ATTR, has_presence_contract, presence_contract


def test_marks_class() -> None:
    @presence_contract
    class Request:
        pass

    assert has_presence_contract(Request)
    assert getattr(Request, PRESENCE_CONTRACT_ATTR) is True


def test_returns_same_class() -> None:
    class Request:
        pass

    assert presence_contract(Request) is Request


def test_unmarked_class() -> None:
    class Request:
        pass

    assert not has_presence_contract(Request)


def test_demo_requests_are_marked() -> None:
    assert has_presence_contract(PatchUserRequest)
    assert has_presence_contract(PatchPrimitivesRequest)


def test_inherited_by_subclasses() -> None:
    class AdminPatchUserRequest(PatchUserRequest):
        role: PresenceField[str] = PresenceField()

    assert has_presence_contract(AdminPatchUserRequest)


def test_applying_twice_is_harmless() -> None:
    @presence_contract
    @presence_contract
    class Request:
        pass

    assert has_presence_contract(Request)


def test_rejects_non_class() -> None:
    def handler() -> None:
        pass

    with pytest.raises(TypeError, match='class'):
        presence_contract(handler)  # type: ignore[type-var]


def test_has_no_effect_on_decoding() -> None:
    # Marker alone does not make bare PresenceField fields decodable
    with pytest.raises(CodecNotRegisteredError):
        PatchUserRequest.model_validate_json('{}')
