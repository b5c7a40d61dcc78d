# services/views.py

"""
Role-scoped view composition: one dashboard per role, chosen from the
capability set, plus the public inventory projection that strips every
tenant-related field.
"""

from collections import Counter
from typing import List

from dependencies.auth import CurrentUser
from core.errors import NotAuthorized
from core.permission_helpers import get_capabilities, has_capability, require_capability
from core.supabase_helpers import safe_select
from models.dashboard import (
    AdminDashboard,
    InventoryStats,
    PublicAuthorityDashboard,
    TenantDashboard,
)
from models.enums import MaintenanceStatus
from models.filters import PropertyFilters
from models.property import PublicProperty
from models.room import PublicRoom
from services.filters import filter_properties, unique_locations
from services.maintenance import fetch_tickets_for_room
from services.properties import count_available, fetch_properties_with_rooms
from services.tenants import find_active_tenancy


# -------------------------------------------------------------
# Public projection
# -------------------------------------------------------------
def to_public_property(row: dict) -> PublicProperty:
    """Copy only inventory and pricing fields; nothing tenant-related."""
    rooms = row.get("rooms") or []
    return PublicProperty(
        id=row["id"],
        name=row["name"],
        location=row["location"],
        description=row.get("description"),
        rooms=[
            PublicRoom(
                id=r["id"],
                room_number=r["room_number"],
                room_type=r["room_type"],
                price=r["price"],
                is_occupied=bool(r.get("is_occupied")),
            )
            for r in rooms
        ],
        total_rooms=len(rooms),
        available_rooms=count_available(rooms),
    )


def inventory_stats(properties: List[dict]) -> InventoryStats:
    total_rooms = sum(len(p.get("rooms") or []) for p in properties)
    available = sum(count_available(p.get("rooms")) for p in properties)
    occupied = total_rooms - available
    rate = round(occupied / total_rooms * 100) if total_rooms else 0

    return InventoryStats(
        total_properties=len(properties),
        total_rooms=total_rooms,
        available_rooms=available,
        occupancy_rate=rate,
        locations=unique_locations(properties),
    )


def search_inventory(filters: PropertyFilters, user: CurrentUser) -> List[PublicProperty]:
    require_capability(user, "inventory:read")
    rows = filter_properties(fetch_properties_with_rooms(), filters)
    return [to_public_property(r) for r in rows]


# -------------------------------------------------------------
# Dashboards
# -------------------------------------------------------------
def admin_dashboard(user: CurrentUser) -> AdminDashboard:
    properties = fetch_properties_with_rooms()
    tenants = safe_select("tenants", {"is_active": True}, columns="id")
    tickets = safe_select("maintenance_logs", columns="id, status")

    counts = Counter(t.get("status") for t in tickets)
    return AdminDashboard(
        capabilities=sorted(get_capabilities(user.role)),
        stats=inventory_stats(properties),
        active_tenants=len(tenants),
        tickets_by_status={s: counts.get(s, 0) for s in MaintenanceStatus.list()},
    )


def tenant_dashboard(user: CurrentUser) -> TenantDashboard:
    tenancy = find_active_tenancy(user.id)
    tickets = fetch_tickets_for_room(tenancy["room_id"]) if tenancy and tenancy.get("room_id") else []

    return TenantDashboard(
        capabilities=sorted(get_capabilities(user.role)),
        tenancy=tenancy,
        tickets=tickets,
    )


def public_authority_dashboard(user: CurrentUser) -> PublicAuthorityDashboard:
    properties = fetch_properties_with_rooms()
    return PublicAuthorityDashboard(
        capabilities=sorted(get_capabilities(user.role)),
        stats=inventory_stats(properties),
        properties=[to_public_property(p) for p in properties],
    )


DASHBOARDS = [
    ("dashboard:admin", admin_dashboard),
    ("dashboard:tenant", tenant_dashboard),
    ("dashboard:public_authority", public_authority_dashboard),
]


def compose_dashboard(user: CurrentUser):
    """Select exactly one dashboard from the caller's capability set."""
    for capability, build in DASHBOARDS:
        if has_capability(user, capability):
            return build(user)
    raise NotAuthorized(f"No dashboard available for role '{user.role}'")
