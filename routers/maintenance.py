# routers/maintenance.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.enums import MaintenanceStatus
from models.filters import TicketFilters
from models.maintenance import MaintenanceTicket, TicketCreate, TicketStatusUpdate
from services import maintenance as maintenance_service
from services.filters import filter_tickets


router = APIRouter(
    prefix="/maintenance",
    tags=["Maintenance"],
)


@router.get(
    "",
    response_model=List[MaintenanceTicket],
    dependencies=[Depends(requires_capability("maintenance:read"))],
)
def list_tickets(
    search: Optional[str] = Query(None, description="Matches title, description or room number"),
    status: Optional[str] = Query(
        None, description=f"One of: all, {', '.join(MaintenanceStatus.list())}"
    ),
    current_user: CurrentUser = Depends(get_current_user),
):
    rows = maintenance_service.list_tickets(current_user)
    return filter_tickets(rows, TicketFilters(search=search, status=status))


# -------------------------------------------------------------
# CREATE Ticket (admin: any room, tenant: own room)
# -------------------------------------------------------------
@router.post(
    "",
    response_model=MaintenanceTicket,
    status_code=201,
    dependencies=[Depends(requires_capability("maintenance:create"))],
)
def create_ticket(payload: TicketCreate, current_user: CurrentUser = Depends(get_current_user)):
    return maintenance_service.create_ticket(payload, current_user)


# -------------------------------------------------------------
# UPDATE Ticket status (admin only)
# -------------------------------------------------------------
@router.patch(
    "/{ticket_id}/status",
    response_model=MaintenanceTicket,
    dependencies=[Depends(requires_capability("maintenance:update_status"))],
)
def update_ticket_status(
    ticket_id: str,
    payload: TicketStatusUpdate,
    current_user: CurrentUser = Depends(get_current_user),
):
    return maintenance_service.update_ticket_status(ticket_id, payload.status, current_user)
