"""
Opt-in markers for presence tracking.

@presence_contract documents, at the type definition, that an aggregate uses
PresenceField fields. It has no effect on serialization: dispatch still comes
from add_presence_support() or per-field PresenceCodec attachment.

    @presence_contract
    class PatchUserRequest(PatchModel):
        name: PresenceField[str] = PresenceField()

The marker is inherited by subclasses.
"""

from __future__ import annotations

from typing import TypeVar

C = TypeVar('C', bound=type)

PRESENCE_CONTRACT_ATTR = '__presence_contract__'


def presence_contract(cls: C) -> C:
    """Mark a class as using presence tracking (documentation only)."""
    if not isinstance(cls, type):
        raise TypeError(f'@presence_contract can only decorate a class, got {cls!r}')
    setattr(cls, PRESENCE_CONTRACT_ATTR, True)
    return cls


def has_presence_contract(cls: type) -> bool:
    return getattr(cls, PRESENCE_CONTRACT_ATTR, False) is True
