# ============================================
# CENTRALIZED ROLE → CAPABILITY MAP
# ============================================
# Three mutually exclusive capability sets. Every router and
# service resolves access through core.permission_helpers, never
# by comparing role strings locally.
ROLE_CAPABILITIES = {

    # =====================================================
    # ADMIN: manages properties, rooms, tenants, tickets
    # =====================================================
    "admin": [
        "properties:read", "properties:write",
        "rooms:read", "rooms:write",
        "tenants:read", "tenants:write",
        "maintenance:read", "maintenance:create",
        "maintenance:update_status",
        "inventory:read",
        "dashboard:admin",
    ],


    # =====================================================
    # TENANT: own tenancy + tickets for own room only
    # =====================================================
    "tenant": [
        "tenancy:read_own",
        "maintenance:read_own",
        "maintenance:create",
        "dashboard:tenant",
    ],


    # =====================================================
    # PUBLIC AUTHORITY: read-only inventory and pricing,
    # never tenant personal data
    # =====================================================
    "public_authority": [
        "inventory:read",
        "dashboard:public_authority",
    ],
}
