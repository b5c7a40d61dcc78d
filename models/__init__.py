from .enums import UserRole, RoomType, MaintenanceStatus
from .profile import Profile
from .room import Room, RoomCreate, RoomUpdate, PublicRoom
from .property import Property, PropertyCreate, PropertyUpdate, PublicProperty
from .tenant import Tenant, TenantCreate, TenantMoveOut
from .maintenance import MaintenanceTicket, TicketCreate, TicketStatusUpdate
from .filters import TicketFilters, TenantFilters, PropertyFilters, PriceRange
from .dashboard import (
    AdminDashboard,
    TenantDashboard,
    PublicAuthorityDashboard,
    InventoryStats,
    OccupancyMismatch,
)
