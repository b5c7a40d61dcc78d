# models/tenant.py

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from .common import blank_to_none, normalize_id, normalize_timestamp, not_blank
from .enums import RoomType


# -------------------------------------------------
# Create: assigns the tenant to a room
# -------------------------------------------------
class TenantCreate(BaseModel):
    full_name: str
    room_id: str
    date_of_birth: Optional[date] = None
    tenant_type: Optional[str] = None
    identification_number: Optional[str] = None
    move_in_date: Optional[date] = None
    profile_id: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("full_name", "room_id", mode="before")
    def validate_required(cls, v):
        return not_blank(normalize_id(v))

    @field_validator(
        "tenant_type", "identification_number", "profile_id",
        "date_of_birth", "move_in_date",
        mode="before",
    )
    def validate_optional(cls, v):
        return blank_to_none(normalize_id(v))


# -------------------------------------------------
# Move-out
# -------------------------------------------------
class TenantMoveOut(BaseModel):
    move_out_date: Optional[date] = None

    model_config = {"extra": "forbid"}


# -------------------------------------------------
# Read (Supabase → API response)
# -------------------------------------------------
class TenantRoomProperty(BaseModel):
    name: str
    location: Optional[str] = None


class TenantRoom(BaseModel):
    room_number: str
    room_type: Optional[RoomType] = None
    price: Optional[float] = None
    property_id: Optional[str] = None
    properties: Optional[TenantRoomProperty] = None


class Tenant(BaseModel):
    id: str
    full_name: str
    date_of_birth: Optional[date] = None
    tenant_type: Optional[str] = None
    identification_number: Optional[str] = None
    room_id: Optional[str] = None
    move_in_date: Optional[date] = None
    move_out_date: Optional[date] = None
    is_active: bool = True
    profile_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Embedded room (select "*, rooms(...)")
    rooms: Optional[TenantRoom] = None

    @field_validator("id", "room_id", "profile_id", mode="before")
    def normalize_ids(cls, v):
        return normalize_id(v)

    @field_validator("created_at", "updated_at", mode="before")
    def parse_timestamps(cls, v):
        return normalize_timestamp(v)
