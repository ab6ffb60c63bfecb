"""
Demo records and PATCH requests.

Shows the three activation styles side by side:
- Global registration: PatchUserRequest, PatchProductRequest (bare
  PresenceField[T] fields, decoded through JsonSerializer with
  add_presence_support)
- Contract marker: @presence_contract on every request (documentation only)
- Per-field attachment: Patch*Request models using
  Annotated[PresenceField[T], PresenceCodec(T)], which work with plain
  BaseModel.model_validate_json and no registration at all
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict

from presence.base_model import PatchModel
from presence.codec import PresenceCodec
from presence.field import PresenceField
from presence.markers import presence_contract

# ==============================================================================
# Records
# ==============================================================================


class DemoRecord(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)


class User(DemoRecord):
    id: uuid.UUID
    name: str
    email: str
    bio: str | None = None
    expires_on: datetime | None = None  # None = never expires
    is_active: bool = True


class Product(DemoRecord):
    id: uuid.UUID
    name: str
    description: str | None = None
    price: Decimal
    stock: int
    category: str | None = None


class Priority(StrEnum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'
    CRITICAL = 'critical'


class Address(DemoRecord):
    street: str
    city: str


# ==============================================================================
# Global registration
# ==============================================================================


@presence_contract
class PatchUserRequest(PatchModel):
    """
    PATCH request for a User.

    Omit a key to leave the field unchanged; send null to clear it.
    """

    name: PresenceField[str] = PresenceField()
    email: PresenceField[str] = PresenceField()
    bio: PresenceField[str | None] = PresenceField()
    expires_on: PresenceField[datetime | None] = PresenceField()
    is_active: PresenceField[bool] = PresenceField()


@presence_contract
class PatchProductRequest(PatchModel):
    name: PresenceField[str] = PresenceField()
    description: PresenceField[str | None] = PresenceField()
    price: PresenceField[Decimal | None] = PresenceField()
    stock: PresenceField[int | None] = PresenceField()
    category: PresenceField[str | None] = PresenceField()


# ==============================================================================
# Per-field attachment
# ==============================================================================


@presence_contract
class PatchPrimitivesRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    name: Annotated[PresenceField[str], PresenceCodec(str)] = PresenceField()
    is_published: Annotated[PresenceField[bool], PresenceCodec(bool)] = PresenceField()


@presence_contract
class PatchEnumsRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    priority: Annotated[PresenceField[Priority | None], PresenceCodec(Priority | None)] = PresenceField()


@presence_contract
class PatchNestedObjectRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    address: Annotated[PresenceField[Address | None], PresenceCodec(Address | None)] = PresenceField()


@presence_contract
class PatchCollectionsRequest(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    tags: Annotated[PresenceField[Sequence[str] | None], PresenceCodec(Sequence[str] | None)] = PresenceField()
