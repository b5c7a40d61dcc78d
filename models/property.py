# models/property.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, field_validator

from .common import blank_to_none, normalize_id, normalize_timestamp, not_blank
from .room import Room, PublicRoom


# -------------------------------------------------
# Shared fields
# -------------------------------------------------
class PropertyBase(BaseModel):
    name: str
    location: str
    description: Optional[str] = None

    @field_validator("name", "location", mode="before")
    def validate_required(cls, v):
        return not_blank(v)

    @field_validator("description", mode="before")
    def validate_description(cls, v):
        return blank_to_none(v)


# -------------------------------------------------
# Create
# -------------------------------------------------
class PropertyCreate(PropertyBase):
    """
    No ID or created_by supplied; Supabase generates the UUID
    and created_by is stamped from the caller's identity.
    """
    model_config = {"extra": "forbid"}


# -------------------------------------------------
# Update (PATCH)
# -------------------------------------------------
class PropertyUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("name", "location", mode="before")
    def validate_required(cls, v):
        if v is None:
            return v
        return not_blank(v)


# -------------------------------------------------
# Read (Supabase → API response)
# -------------------------------------------------
class Property(PropertyBase):
    id: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    rooms: List[Room] = []

    @field_validator("id", mode="before")
    def normalize_ids(cls, v):
        return normalize_id(v)

    @field_validator("created_at", "updated_at", mode="before")
    def parse_timestamps(cls, v):
        return normalize_timestamp(v)


class PublicProperty(BaseModel):
    """What a public authority may see of a property."""
    id: str
    name: str
    location: str
    description: Optional[str] = None
    rooms: List[PublicRoom] = []
    total_rooms: int = 0
    available_rooms: int = 0
