from fastapi import Depends
from dependencies.auth import get_current_user, CurrentUser
from core.errors import NotAuthorized
from core.permissions import ROLE_CAPABILITIES


# -----------------------------------------------------
# Capability resolution: the single place a role is
# turned into an allowed operation set
# -----------------------------------------------------
def get_capabilities(role: str) -> frozenset:
    return frozenset(ROLE_CAPABILITIES.get(role, []))


def has_capability(user: CurrentUser, capability: str) -> bool:
    return capability in get_capabilities(user.role)


def require_capability(user: CurrentUser, capability: str):
    """Raise NotAuthorized unless the user's role grants `capability`."""
    if not has_capability(user, capability):
        raise NotAuthorized(
            f"Role '{user.role}' is not allowed to perform '{capability}'"
        )


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_capability(capability: str):
    """
    Usage:
        @router.post("", dependencies=[Depends(requires_capability("rooms:write"))])
    """

    def dependency(current_user: CurrentUser = Depends(get_current_user)):
        require_capability(current_user, capability)
        return current_user

    return dependency


def is_tenant(user: CurrentUser) -> bool:
    return user.role == "tenant"
