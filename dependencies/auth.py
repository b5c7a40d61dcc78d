from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from core.supabase_client import get_supabase_client
from core.supabase_helpers import safe_select
from core.permissions import ROLE_CAPABILITIES
from core.logging_config import logger


bearer_scheme = HTTPBearer()

DEFAULT_ROLE = "tenant"


# ============================================================
# Current User Model (authenticated identity)
# ============================================================
class CurrentUser(BaseModel):
    """
    Identity passed explicitly into every core operation.
    Read-only for the lifetime of a request.
    """
    id: str
    email: str
    role: str
    full_name: Optional[str] = None

    model_config = {"frozen": True}


# ============================================================
# AUTH DECODING (Supabase: validates JWT + loads profile)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    # ---------------------------------------------------------
    # Validate JWT via Supabase GoTrue
    # ---------------------------------------------------------
    try:
        auth_resp = client.auth.get_user(token)
    except Exception:
        raise unauthorized

    if not auth_resp or not auth_resp.user:
        raise unauthorized

    auth_user = auth_resp.user
    if not auth_user.email:
        raise unauthorized

    # ---------------------------------------------------------
    # Role comes from the profiles table; user_metadata is the
    # fallback for accounts whose profile row is not created yet
    # ---------------------------------------------------------
    profile = safe_select("profiles", {"id": auth_user.id}, single=True)
    metadata = auth_user.user_metadata or {}

    if profile:
        role = profile.get("role")
        full_name = profile.get("full_name")
    else:
        logger.warning(f"No profile row for user {auth_user.id}; using auth metadata")
        role = metadata.get("role", DEFAULT_ROLE)
        full_name = metadata.get("full_name")

    if role not in ROLE_CAPABILITIES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown role '{role}'",
        )

    return CurrentUser(
        id=auth_user.id,
        email=auth_user.email,
        role=role,
        full_name=full_name,
    )


# ============================================================
# OPTIONAL AUTHENTICATION (for redirecting pages)
# ============================================================
def get_optional_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
) -> Optional[CurrentUser]:
    """
    Returns CurrentUser if a valid token is provided, None otherwise.
    Does not raise for a missing or invalid token.
    """
    if not credentials:
        return None

    try:
        return get_current_user(credentials)
    except HTTPException:
        return None
