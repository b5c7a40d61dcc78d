# services/tenants.py

from typing import List, Optional

from dependencies.auth import CurrentUser
from core.permission_helpers import require_capability
from core.supabase_helpers import safe_select
from services.occupancy import TENANT_WITH_ROOM


def list_tenants(user: CurrentUser) -> List[dict]:
    """All tenants, newest first, with room number and property name."""
    require_capability(user, "tenants:read")
    return safe_select("tenants", columns=TENANT_WITH_ROOM, order="created_at", desc=True)


def find_active_tenancy(profile_id: str) -> Optional[dict]:
    return safe_select(
        "tenants",
        {"profile_id": profile_id, "is_active": True},
        columns=TENANT_WITH_ROOM,
        single=True,
    )


def get_active_tenancy(user: CurrentUser) -> Optional[dict]:
    """The caller's own active tenancy, or None when unassigned."""
    require_capability(user, "tenancy:read_own")
    return find_active_tenancy(user.id)
