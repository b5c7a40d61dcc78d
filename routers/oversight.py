# routers/oversight.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.enums import RoomType
from models.filters import PropertyFilters
from models.property import PublicProperty
from services.views import search_inventory


router = APIRouter(
    prefix="/oversight",
    tags=["Oversight"],
)


# ============================================================
# GET: Inventory search (read-only, no tenant data)
# ============================================================
@router.get(
    "/properties",
    response_model=List[PublicProperty],
    summary="Search property and room inventory",
    dependencies=[Depends(requires_capability("inventory:read"))],
)
def list_inventory(
    search: Optional[str] = Query(None, description="Matches property name or location"),
    location: Optional[str] = Query(None, description="Exact location, or 'all'"),
    room_type: Optional[str] = Query(None, description=f"One of: all, {', '.join(RoomType.list())}"),
    price_range: Optional[str] = Query(None, description="'all', '<min>-<max>' or '<min>-'"),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    A property matches the room criteria when at least one of its
    rooms has the requested type and a price inside the range.
    """
    filters = PropertyFilters(
        search=search,
        location=location,
        room_type=room_type,
        price_range=price_range,
    )
    return search_inventory(filters, current_user)
