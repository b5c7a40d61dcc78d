# models/dashboard.py

from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel

from .maintenance import MaintenanceTicket
from .property import PublicProperty
from .tenant import Tenant


class InventoryStats(BaseModel):
    total_properties: int = 0
    total_rooms: int = 0
    available_rooms: int = 0
    occupancy_rate: int = 0          # rounded percentage
    locations: List[str] = []


class AdminDashboard(BaseModel):
    view: Literal["admin"] = "admin"
    capabilities: List[str]
    stats: InventoryStats
    active_tenants: int = 0
    tickets_by_status: Dict[str, int] = {}


class TenantDashboard(BaseModel):
    view: Literal["tenant"] = "tenant"
    capabilities: List[str]
    tenancy: Optional[Tenant] = None
    tickets: List[MaintenanceTicket] = []


class PublicAuthorityDashboard(BaseModel):
    view: Literal["public_authority"] = "public_authority"
    capabilities: List[str]
    stats: InventoryStats
    properties: List[PublicProperty] = []


Dashboard = Union[AdminDashboard, TenantDashboard, PublicAuthorityDashboard]


class OccupancyMismatch(BaseModel):
    """A room whose stored flag disagrees with its active tenants."""
    room_id: str
    room_number: Optional[str] = None
    property_id: Optional[str] = None
    is_occupied: bool
    active_tenant_ids: List[str] = []
