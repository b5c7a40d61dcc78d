# routers/tenants.py

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query

from core.permission_helpers import requires_capability
from dependencies.auth import get_current_user, CurrentUser
from models.filters import TenantFilters
from models.tenant import Tenant, TenantCreate, TenantMoveOut
from services import occupancy, tenants as tenant_service
from services.filters import filter_tenants


router = APIRouter(
    prefix="/tenants",
    tags=["Tenants"],
)


@router.get(
    "",
    response_model=List[Tenant],
    dependencies=[Depends(requires_capability("tenants:read"))],
)
def list_tenants(
    search: Optional[str] = Query(None, description="Matches full name or room number"),
    current_user: CurrentUser = Depends(get_current_user),
):
    rows = tenant_service.list_tenants(current_user)
    return filter_tenants(rows, TenantFilters(search=search))


# -------------------------------------------------------------
# GET own tenancy (tenant role)
# -------------------------------------------------------------
@router.get(
    "/me",
    response_model=Optional[Tenant],
    dependencies=[Depends(requires_capability("tenancy:read_own"))],
)
def get_my_tenancy(current_user: CurrentUser = Depends(get_current_user)):
    return tenant_service.get_active_tenancy(current_user)


# -------------------------------------------------------------
# CREATE Tenant: assigns and occupies the room
# -------------------------------------------------------------
@router.post(
    "",
    response_model=Tenant,
    status_code=201,
    dependencies=[Depends(requires_capability("tenants:write"))],
)
def create_tenant(payload: TenantCreate, current_user: CurrentUser = Depends(get_current_user)):
    return occupancy.create_tenant(payload, current_user)


# -------------------------------------------------------------
# MOVE OUT: deactivates the tenant and frees the room
# -------------------------------------------------------------
@router.post(
    "/{tenant_id}/move-out",
    response_model=Tenant,
    dependencies=[Depends(requires_capability("tenants:write"))],
)
def move_out_tenant(
    tenant_id: str,
    payload: Optional[TenantMoveOut] = Body(None),
    current_user: CurrentUser = Depends(get_current_user),
):
    return occupancy.move_out_tenant(tenant_id, payload or TenantMoveOut(), current_user)
