# services/properties.py

"""
Property and room management for the admin capability set.

Rooms are created unoccupied and room edits never touch is_occupied;
occupancy is written only by services.occupancy.
"""

from typing import List, Optional

from dependencies.auth import CurrentUser
from core.errors import NotFound, RoomNotFound, ValidationError
from core.logging_config import logger
from core.permission_helpers import require_capability
from core.supabase_helpers import safe_insert, safe_select, safe_update, utc_now
from core.utils import sanitize
from models.property import PropertyCreate, PropertyUpdate
from models.room import RoomCreate, RoomUpdate


PROPERTY_WITH_ROOMS = "*, rooms(*)"
ROOM_WITH_PROPERTY = "*, properties(id, name, location)"


def _sort_rooms(rows: List[dict]) -> List[dict]:
    for row in rows:
        row["rooms"] = sorted(row.get("rooms") or [], key=lambda r: str(r.get("room_number")))
    return rows


# -------------------------------------------------------------
# Reads
# -------------------------------------------------------------
def fetch_properties_with_rooms() -> List[dict]:
    """All properties newest first, rooms embedded and ordered by number."""
    rows = safe_select(
        "properties",
        columns=PROPERTY_WITH_ROOMS,
        order="created_at",
        desc=True,
    )
    return _sort_rooms(rows)


def list_properties(user: CurrentUser) -> List[dict]:
    require_capability(user, "properties:read")
    return fetch_properties_with_rooms()


def get_property(property_id: str) -> dict:
    row = safe_select("properties", {"id": property_id}, columns=PROPERTY_WITH_ROOMS, single=True)
    if not row:
        raise NotFound(f"Property {property_id} not found")
    return _sort_rooms([row])[0]


def get_room(room_id: str, columns: str = "*") -> dict:
    room = safe_select("rooms", {"id": room_id}, columns=columns, single=True)
    if not room:
        raise RoomNotFound(room_id)
    return room


def list_rooms(user: CurrentUser, available_only: bool = False) -> List[dict]:
    """Rooms ordered by room_number; available_only feeds the assignment picker."""
    require_capability(user, "rooms:read")

    filters = {"is_occupied": False} if available_only else None
    return safe_select("rooms", filters, columns=ROOM_WITH_PROPERTY, order="room_number")


# -------------------------------------------------------------
# Writes
# -------------------------------------------------------------
def create_property(payload: PropertyCreate, user: CurrentUser) -> dict:
    require_capability(user, "properties:write")

    data = sanitize(payload.model_dump(mode="json"))
    data["created_by"] = user.id

    row = safe_insert("properties", data)
    logger.info(f"Property {row['id']} created by {user.id}")
    row.setdefault("rooms", [])
    return row


def update_property(property_id: str, payload: PropertyUpdate, user: CurrentUser) -> dict:
    require_capability(user, "properties:write")

    data = payload.model_dump(mode="json", exclude_unset=True)
    # description may be cleared; name/location may not
    changes = sanitize({k: v for k, v in data.items() if k != "description"})
    if "description" in data:
        changes["description"] = (data["description"] or "").strip() or None
    if not changes:
        raise ValidationError("No fields to update")

    changes["updated_at"] = utc_now()
    row = safe_update("properties", {"id": property_id}, changes)
    if not row:
        raise NotFound(f"Property {property_id} not found")

    logger.info(f"Property {property_id} updated by {user.id}")
    return get_property(property_id)


def create_room(property_id: str, payload: RoomCreate, user: CurrentUser) -> dict:
    require_capability(user, "rooms:write")

    # Parent must exist
    get_property(property_id)

    data = sanitize(payload.model_dump(mode="json"))
    data["property_id"] = property_id
    data["is_occupied"] = False

    row = safe_insert("rooms", data)
    logger.info(f"Room {row['id']} ({row.get('room_number')}) created under property {property_id}")
    return row


def update_room(room_id: str, payload: RoomUpdate, user: CurrentUser) -> dict:
    require_capability(user, "rooms:write")

    changes = sanitize(payload.model_dump(mode="json", exclude_unset=True))
    changes.pop("is_occupied", None)
    if not changes:
        raise ValidationError("No fields to update")

    changes["updated_at"] = utc_now()
    row = safe_update("rooms", {"id": room_id}, changes)
    if not row:
        raise RoomNotFound(room_id)

    logger.info(f"Room {room_id} updated by {user.id}")
    return row


def count_available(rooms: Optional[List[dict]]) -> int:
    return sum(1 for r in rooms or [] if not r.get("is_occupied"))
