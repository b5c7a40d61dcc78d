# models/filters.py

from typing import Optional
from pydantic import BaseModel, field_validator


ALL = "all"


class _FilterBase(BaseModel):
    """
    Filter options arrive straight from query strings. Values are kept
    as plain strings: unrecognised or empty values mean "no restriction"
    and are never rejected.
    """

    @field_validator("*", mode="before")
    def none_to_default(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        if isinstance(v, str):
            return v.strip()
        return v


class TicketFilters(_FilterBase):
    search: str = ""
    status: str = ALL


class TenantFilters(_FilterBase):
    search: str = ""


class PropertyFilters(_FilterBase):
    search: str = ""
    location: str = ALL
    room_type: str = ALL
    price_range: str = ALL


class PriceRange(BaseModel):
    """Inclusive bounds; max None means unbounded."""
    min: float
    max: Optional[float] = None

    def contains(self, price) -> bool:
        if price is None:
            return False
        if price < self.min:
            return False
        return self.max is None or price <= self.max
