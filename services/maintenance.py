# services/maintenance.py

"""
Maintenance ticket lifecycle.

States: open → in_progress → resolved, with any-to-any transitions
and no terminal state; tickets can be reopened. property_id is always
copied from the ticket's room, never taken from the caller.
"""

from typing import List

from dependencies.auth import CurrentUser
from core.errors import NotAuthorized, NotFound
from core.logging_config import logger
from core.permission_helpers import has_capability, is_tenant, require_capability
from core.supabase_helpers import safe_insert, safe_select, safe_update, utc_now
from models.enums import MaintenanceStatus
from models.maintenance import TicketCreate
from services.properties import get_room
from services.tenants import find_active_tenancy


TICKET_WITH_ROOM = "*, rooms(room_number, properties(name))"


def get_ticket(ticket_id: str, columns: str = TICKET_WITH_ROOM) -> dict:
    ticket = safe_select("maintenance_logs", {"id": ticket_id}, columns=columns, single=True)
    if not ticket:
        raise NotFound(f"Maintenance ticket {ticket_id} not found")
    return ticket


def require_own_room(user: CurrentUser, room_id: str):
    """Tenants may only act on the room of their own active tenancy."""
    tenancy = find_active_tenancy(user.id)
    if not tenancy or tenancy.get("room_id") != room_id:
        raise NotAuthorized("Tenants can only access maintenance for their own room")


# -------------------------------------------------------------
# Create
# -------------------------------------------------------------
def create_ticket(payload: TicketCreate, user: CurrentUser) -> dict:
    require_capability(user, "maintenance:create")

    # Tenants get 403 for any room but their own, existing or not
    if is_tenant(user):
        require_own_room(user, payload.room_id)

    room = get_room(payload.room_id)

    data = {
        "title": payload.title,
        "description": payload.description,
        "room_id": room["id"],
        "property_id": room["property_id"],
        "reported_by": user.id,
        "status": MaintenanceStatus.open.value,
    }
    # Vendor assignment is an admin decision
    if payload.assigned_vendor and has_capability(user, "maintenance:update_status"):
        data["assigned_vendor"] = payload.assigned_vendor

    ticket = safe_insert("maintenance_logs", data)
    logger.info(f"Maintenance ticket {ticket['id']} opened for room {room['id']} by {user.id}")
    return get_ticket(ticket["id"])


# -------------------------------------------------------------
# Status transition
# -------------------------------------------------------------
def update_ticket_status(ticket_id: str, new_status: MaintenanceStatus, user: CurrentUser) -> dict:
    """
    Any status may move to any other. Re-applying the current status
    performs no write.
    """
    require_capability(user, "maintenance:update_status")

    new_status = MaintenanceStatus(new_status)
    ticket = get_ticket(ticket_id)
    if ticket.get("status") == new_status.value:
        return ticket

    updated = safe_update(
        "maintenance_logs",
        {"id": ticket_id},
        {"status": new_status.value, "updated_at": utc_now()},
    )
    if not updated:
        raise NotFound(f"Maintenance ticket {ticket_id} not found")

    logger.info(f"Ticket {ticket_id}: {ticket.get('status')} → {new_status.value} by {user.id}")
    return get_ticket(ticket_id)


# -------------------------------------------------------------
# Reads
# -------------------------------------------------------------
def fetch_tickets_for_room(room_id: str) -> List[dict]:
    return safe_select(
        "maintenance_logs",
        {"room_id": room_id},
        columns=TICKET_WITH_ROOM,
        order="created_at",
        desc=True,
    )


def list_tickets_for_room(room_id: str, user: CurrentUser) -> List[dict]:
    """Tickets for one room, newest first, scoped to what the caller may see."""
    if has_capability(user, "maintenance:read"):
        get_room(room_id)
    elif has_capability(user, "maintenance:read_own"):
        require_own_room(user, room_id)
    else:
        raise NotAuthorized(f"Role '{user.role}' cannot view maintenance tickets")

    return fetch_tickets_for_room(room_id)


def list_tickets(user: CurrentUser) -> List[dict]:
    require_capability(user, "maintenance:read")
    return safe_select(
        "maintenance_logs",
        columns=TICKET_WITH_ROOM,
        order="created_at",
        desc=True,
    )
