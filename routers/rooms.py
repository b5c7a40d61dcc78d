# routers/rooms.py

from typing import List
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.maintenance import MaintenanceTicket
from models.room import Room, RoomUpdate
from services import properties as property_service
from services.maintenance import list_tickets_for_room


router = APIRouter(
    prefix="/rooms",
    tags=["Rooms"],
)


@router.get(
    "",
    response_model=List[Room],
    dependencies=[Depends(requires_capability("rooms:read"))],
)
def list_rooms(
    available_only: bool = Query(False, description="Only rooms without an active tenant"),
    current_user: CurrentUser = Depends(get_current_user),
):
    return property_service.list_rooms(current_user, available_only=available_only)


# -------------------------------------------------------------
# UPDATE Room: number, type, price only
# -------------------------------------------------------------
@router.patch(
    "/{room_id}",
    response_model=Room,
    dependencies=[Depends(requires_capability("rooms:write"))],
)
def update_room(room_id: str, payload: RoomUpdate, current_user: CurrentUser = Depends(get_current_user)):
    return property_service.update_room(room_id, payload, current_user)


# -------------------------------------------------------------
# LIST Room maintenance (newest first)
# -------------------------------------------------------------
@router.get("/{room_id}/maintenance", response_model=List[MaintenanceTicket])
def list_room_maintenance(room_id: str, current_user: CurrentUser = Depends(get_current_user)):
    return list_tickets_for_room(room_id, current_user)
