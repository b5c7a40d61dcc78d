# models/profile.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from .common import normalize_timestamp
from .enums import UserRole


class Profile(BaseModel):
    """
    Mirrors public.profiles. Created at account provisioning;
    role changes only through administrative action.
    """
    id: str
    email: str
    full_name: str
    role: UserRole = UserRole.tenant
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", mode="before")
    def parse_timestamps(cls, v):
        return normalize_timestamp(v)
