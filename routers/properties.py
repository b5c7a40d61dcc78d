# routers/properties.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.filters import PropertyFilters
from models.property import Property, PropertyCreate, PropertyUpdate
from models.room import Room, RoomCreate
from services import properties as property_service
from services.filters import filter_properties


router = APIRouter(
    prefix="/properties",
    tags=["Properties"],
)


# -------------------------------------------------------------
# LIST Properties (rooms embedded)
# -------------------------------------------------------------
@router.get(
    "",
    response_model=List[Property],
    dependencies=[Depends(requires_capability("properties:read"))],
)
def list_properties(
    search: Optional[str] = Query(None, description="Matches name or location"),
    current_user: CurrentUser = Depends(get_current_user),
):
    rows = property_service.list_properties(current_user)
    return filter_properties(rows, PropertyFilters(search=search))


# -------------------------------------------------------------
# CREATE Property
# -------------------------------------------------------------
@router.post(
    "",
    response_model=Property,
    status_code=201,
    dependencies=[Depends(requires_capability("properties:write"))],
)
def create_property(payload: PropertyCreate, current_user: CurrentUser = Depends(get_current_user)):
    return property_service.create_property(payload, current_user)


# -------------------------------------------------------------
# UPDATE Property
# -------------------------------------------------------------
@router.patch(
    "/{property_id}",
    response_model=Property,
    dependencies=[Depends(requires_capability("properties:write"))],
)
def update_property(
    property_id: str,
    payload: PropertyUpdate,
    current_user: CurrentUser = Depends(get_current_user),
):
    return property_service.update_property(property_id, payload, current_user)


# -------------------------------------------------------------
# CREATE Room under a Property
# -------------------------------------------------------------
@router.post(
    "/{property_id}/rooms",
    response_model=Room,
    status_code=201,
    dependencies=[Depends(requires_capability("rooms:write"))],
)
def create_room(
    property_id: str,
    payload: RoomCreate,
    current_user: CurrentUser = Depends(get_current_user),
):
    return property_service.create_room(property_id, payload, current_user)
