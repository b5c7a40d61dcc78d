# models/maintenance.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from .common import blank_to_none, normalize_id, normalize_timestamp, not_blank
from .enums import MaintenanceStatus


# -------------------------------------------------
# Create: property_id is derived from the room,
# reported_by from the caller, status starts open
# -------------------------------------------------
class TicketCreate(BaseModel):
    title: str
    description: str
    room_id: str
    assigned_vendor: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("title", "description", "room_id", mode="before")
    def validate_required(cls, v):
        return not_blank(normalize_id(v))

    @field_validator("assigned_vendor", mode="before")
    def validate_vendor(cls, v):
        return blank_to_none(v)


# -------------------------------------------------
# Status transition (admin only, any → any)
# -------------------------------------------------
class TicketStatusUpdate(BaseModel):
    status: MaintenanceStatus

    model_config = {"extra": "forbid"}


# -------------------------------------------------
# Read (Supabase → API response)
# -------------------------------------------------
class TicketRoomProperty(BaseModel):
    name: str


class TicketRoom(BaseModel):
    room_number: str
    properties: Optional[TicketRoomProperty] = None


class MaintenanceTicket(BaseModel):
    id: str
    title: str
    description: str
    status: MaintenanceStatus = MaintenanceStatus.open
    assigned_vendor: Optional[str] = None
    image_url: Optional[str] = None
    room_id: str
    property_id: str
    reported_by: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Embedded room (select "*, rooms(room_number, properties(name))")
    rooms: Optional[TicketRoom] = None

    @field_validator("id", "room_id", "property_id", "reported_by", mode="before")
    def normalize_ids(cls, v):
        return normalize_id(v)

    @field_validator("created_at", "updated_at", mode="before")
    def parse_timestamps(cls, v):
        return normalize_timestamp(v)
