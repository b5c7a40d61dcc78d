# services/occupancy.py

"""
Room occupancy consistency.

Invariant: rooms.is_occupied is true iff exactly one tenant with
is_active = true references the room. These functions are the only
writers of rooms.is_occupied and tenants.is_active.

Each operation is a two-row change (room + tenant). The room side is
always written with a conditional update, so two concurrent callers
can never both claim or both release the same room. If the second
write fails, the first one is rolled back with a compensating update
before the error propagates.
"""

from datetime import date
from typing import List

from dependencies.auth import CurrentUser
from core.errors import GatewayError, NotFound, RoomUnavailable, ValidationError
from core.logging_config import logger
from core.permission_helpers import require_capability
from core.supabase_helpers import safe_insert, safe_select, safe_update, utc_now
from core.utils import sanitize
from models.dashboard import OccupancyMismatch
from models.enums import UserRole
from models.profile import Profile
from models.tenant import TenantCreate, TenantMoveOut
from services.properties import get_room


TENANT_WITH_ROOM = "*, rooms(room_number, room_type, price, property_id, properties(name, location))"


def get_tenant(tenant_id: str, columns: str = "*") -> dict:
    tenant = safe_select("tenants", {"id": tenant_id}, columns=columns, single=True)
    if not tenant:
        raise NotFound(f"Tenant {tenant_id} not found")
    return tenant


# -------------------------------------------------------------
# Room claim / release (compare-and-set on is_occupied)
# -------------------------------------------------------------
def claim_room(room_id: str) -> dict:
    """Flip is_occupied false → true, or raise RoomUnavailable."""
    room = safe_update(
        "rooms",
        {"id": room_id, "is_occupied": False},
        {"is_occupied": True, "updated_at": utc_now()},
    )
    if not room:
        raise RoomUnavailable(room_id)
    return room


def release_room(room_id: str):
    return safe_update(
        "rooms",
        {"id": room_id, "is_occupied": True},
        {"is_occupied": False, "updated_at": utc_now()},
    )


# -------------------------------------------------------------
# Create tenant (assign to room)
# -------------------------------------------------------------
def create_tenant(payload: TenantCreate, user: CurrentUser) -> dict:
    """
    Insert an active tenant and mark the room occupied, all or nothing.

    Raises:
        NotAuthorized: caller lacks tenants:write
        RoomNotFound: room_id does not resolve
        RoomUnavailable: room already occupied (checked, then claimed atomically)
        NotFound: profile_id given but no such profile
        ValidationError: profile_id belongs to a non-tenant account, or
            one that already has an active tenancy
        GatewayError: backend failure (after the room claim is undone,
            unless the tenant row turns out to have been stored)
    """
    require_capability(user, "tenants:write")

    room = get_room(payload.room_id)
    if room.get("is_occupied"):
        raise RoomUnavailable(payload.room_id)

    if payload.profile_id:
        row = safe_select("profiles", {"id": payload.profile_id}, single=True)
        if not row:
            raise NotFound(f"Profile {payload.profile_id} not found")
        if Profile.model_validate(row).role != UserRole.tenant:
            raise ValidationError(f"Profile {payload.profile_id} is not a tenant account")

        # One active tenancy per account
        current = safe_select(
            "tenants",
            {"profile_id": payload.profile_id, "is_active": True},
            columns="id, room_id",
            single=True,
        )
        if current:
            raise ValidationError(
                f"Profile {payload.profile_id} already has an active tenancy in room {current['room_id']}"
            )

    data = sanitize(payload.model_dump(mode="json"))
    data["is_active"] = True

    claim_room(payload.room_id)

    try:
        tenant = safe_insert("tenants", data)
    except GatewayError:
        tenant = _find_inserted_tenant(payload.room_id)
        if not tenant:
            logger.error(f"Tenant insert failed; releasing room {payload.room_id}")
            _undo(release_room, payload.room_id)
            raise
        logger.warning(f"Tenant insert for room {payload.room_id} returned no data but the row exists")

    logger.info(f"Tenant {tenant['id']} assigned to room {payload.room_id} by {user.id}")
    return get_tenant(tenant["id"], columns=TENANT_WITH_ROOM)


def _find_inserted_tenant(room_id: str):
    """
    An insert can be stored even when no representation comes back
    (e.g. the row is hidden by a select policy). The room is claimed,
    so an active tenant on it can only be the one just inserted.
    Returns None when the row is absent or cannot be read.
    """
    try:
        return safe_select("tenants", {"room_id": room_id, "is_active": True}, columns="id", single=True)
    except GatewayError as e:
        logger.error(f"Could not re-read tenants for room {room_id}: {e.message}")
        return None


# -------------------------------------------------------------
# Move out
# -------------------------------------------------------------
def move_out_tenant(tenant_id: str, payload: TenantMoveOut, user: CurrentUser) -> dict:
    """
    Deactivate a tenant and free their room. Moving out a tenant
    who is already inactive returns the stored row without writing.
    """
    require_capability(user, "tenants:write")

    tenant = get_tenant(tenant_id)
    if not tenant.get("is_active"):
        return get_tenant(tenant_id, columns=TENANT_WITH_ROOM)

    move_out_date = (payload.move_out_date or date.today()).isoformat()
    updated = safe_update(
        "tenants",
        {"id": tenant_id, "is_active": True},
        {"is_active": False, "move_out_date": move_out_date, "updated_at": utc_now()},
    )
    if not updated:
        # Someone else moved them out first
        return get_tenant(tenant_id, columns=TENANT_WITH_ROOM)

    room_id = tenant.get("room_id")
    if room_id:
        try:
            release_room(room_id)
        except GatewayError:
            logger.error(f"Room {room_id} release failed; re-activating tenant {tenant_id}")
            _undo(
                safe_update,
                "tenants",
                {"id": tenant_id},
                {"is_active": True, "move_out_date": tenant.get("move_out_date")},
            )
            raise

    logger.info(f"Tenant {tenant_id} moved out of room {room_id} by {user.id}")
    return get_tenant(tenant_id, columns=TENANT_WITH_ROOM)


def _undo(func, *args):
    try:
        func(*args)
    except GatewayError as e:
        logger.error(f"Compensating write {func.__name__}{args} failed: {e.message}")


# -------------------------------------------------------------
# Audit (read-only)
# -------------------------------------------------------------
def find_occupancy_mismatches(rooms: List[dict], tenants: List[dict]) -> List[OccupancyMismatch]:
    active_by_room = {}
    for t in tenants:
        if t.get("is_active") and t.get("room_id"):
            active_by_room.setdefault(t["room_id"], []).append(t["id"])

    mismatches = []
    for room in rooms:
        active = active_by_room.get(room["id"], [])
        occupied = bool(room.get("is_occupied"))
        if occupied != bool(active) or len(active) > 1:
            mismatches.append(
                OccupancyMismatch(
                    room_id=room["id"],
                    room_number=room.get("room_number"),
                    property_id=room.get("property_id"),
                    is_occupied=occupied,
                    active_tenant_ids=active,
                )
            )
    return mismatches


def audit_occupancy(user: CurrentUser) -> List[OccupancyMismatch]:
    """Rooms whose occupancy flag disagrees with their active tenants."""
    require_capability(user, "tenants:read")

    rooms = safe_select("rooms", order="room_number")
    tenants = safe_select("tenants", {"is_active": True})
    mismatches = find_occupancy_mismatches(rooms, tenants)

    if mismatches:
        logger.warning(f"Occupancy audit found {len(mismatches)} inconsistent room(s)")
    return mismatches
