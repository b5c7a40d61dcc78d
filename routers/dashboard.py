# routers/dashboard.py

from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from core.config import settings
from core.permission_helpers import get_capabilities
from dependencies.auth import get_current_user, get_optional_auth, CurrentUser
from models.dashboard import Dashboard
from services.views import compose_dashboard


router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


# -----------------------------------------------------
# GET /dashboard
# Unauthenticated callers are sent to the sign-in flow
# -----------------------------------------------------
@router.get("", response_model=Dashboard, summary="Role-scoped dashboard")
def get_dashboard(current_user: Optional[CurrentUser] = Depends(get_optional_auth)):
    if current_user is None:
        return RedirectResponse(settings.SIGN_IN_URL, status_code=307)
    return compose_dashboard(current_user)


@router.get("/capabilities", summary="Operations allowed for the caller's role")
def get_my_capabilities(current_user: CurrentUser = Depends(get_current_user)):
    return {
        "role": current_user.role,
        "capabilities": sorted(get_capabilities(current_user.role)),
    }
