# routers/occupancy.py

from typing import List
from fastapi import APIRouter, Depends

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.dashboard import OccupancyMismatch
from services.occupancy import audit_occupancy


router = APIRouter(
    prefix="/occupancy",
    tags=["Occupancy"],
)


@router.get(
    "/audit",
    response_model=List[OccupancyMismatch],
    dependencies=[Depends(requires_capability("tenants:read"))],
)
def get_occupancy_audit(current_user: CurrentUser = Depends(get_current_user)):
    """
    Rooms whose is_occupied flag disagrees with their active tenants.
    Empty when the data is consistent. Read-only; nothing is repaired.
    """
    return audit_occupancy(current_user)
