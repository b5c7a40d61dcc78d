# models/room.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from .common import normalize_id, normalize_timestamp, not_blank
from .enums import RoomType


# -------------------------------------------------
# Create
# -------------------------------------------------
class RoomCreate(BaseModel):
    """
    Room under an existing property. The parent id comes from
    the URL and is_occupied always starts false.
    """
    room_number: str
    room_type: RoomType
    price: float = Field(..., ge=0)

    model_config = {"extra": "forbid"}

    @field_validator("room_number", mode="before")
    def validate_room_number(cls, v):
        return not_blank(v)


# -------------------------------------------------
# Update (PATCH): occupancy is not editable here
# -------------------------------------------------
class RoomUpdate(BaseModel):
    room_number: Optional[str] = None
    room_type: Optional[RoomType] = None
    price: Optional[float] = Field(None, ge=0)

    model_config = {"extra": "forbid"}

    @field_validator("room_number", mode="before")
    def validate_room_number(cls, v):
        if v is None:
            return v
        return not_blank(v)


# -------------------------------------------------
# Read (Supabase → API response)
# -------------------------------------------------
class PropertySummary(BaseModel):
    id: Optional[str] = None
    name: str
    location: Optional[str] = None


class Room(BaseModel):
    id: str
    property_id: str
    room_number: str
    room_type: RoomType
    price: float
    is_occupied: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Embedded parent (select "*, properties(...)")
    properties: Optional[PropertySummary] = None

    @field_validator("id", "property_id", mode="before")
    def normalize_ids(cls, v):
        return normalize_id(v)

    @field_validator("created_at", "updated_at", mode="before")
    def parse_timestamps(cls, v):
        return normalize_timestamp(v)


# -------------------------------------------------
# Public projection: inventory and pricing only
# -------------------------------------------------
class PublicRoom(BaseModel):
    id: str
    room_number: str
    room_type: RoomType
    price: float
    is_occupied: bool
