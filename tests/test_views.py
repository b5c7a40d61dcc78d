# tests/test_views.py

"""
Tests for capability resolution and role-scoped dashboards.
"""

import pytest

from core.errors import NotAuthorized
from core.permission_helpers import get_capabilities
from core.permissions import ROLE_CAPABILITIES
from dependencies.auth import CurrentUser
from models.dashboard import AdminDashboard, PublicAuthorityDashboard, TenantDashboard
from models.filters import PropertyFilters
from services import views


# Fields a public_authority caller must never receive
TENANT_PERSONAL_FIELDS = {
    "full_name",
    "identification_number",
    "date_of_birth",
    "move_in_date",
    "move_out_date",
    "tenant_type",
    "profile_id",
}


def all_keys(value):
    """Every dict key anywhere inside a JSON-like structure."""
    if isinstance(value, dict):
        keys = set(value)
        for v in value.values():
            keys |= all_keys(v)
        return keys
    if isinstance(value, list):
        keys = set()
        for v in value:
            keys |= all_keys(v)
        return keys
    return set()


def test_dashboard_capability_sets_are_exclusive():
    dashboards = [
        {c for c in get_capabilities(role) if c.startswith("dashboard:")}
        for role in ROLE_CAPABILITIES
    ]
    assert all(len(d) == 1 for d in dashboards)
    assert len(set.union(*dashboards)) == len(ROLE_CAPABILITIES)


def test_unknown_role_has_no_capabilities():
    assert get_capabilities("landlord") == frozenset()


def test_admin_dashboard(seeded, admin_user):
    dashboard = views.compose_dashboard(admin_user)

    assert isinstance(dashboard, AdminDashboard)
    assert dashboard.stats.total_properties == 2
    assert dashboard.stats.total_rooms == 3
    assert dashboard.stats.available_rooms == 2
    assert dashboard.stats.occupancy_rate == 33
    assert dashboard.active_tenants == 1
    assert dashboard.tickets_by_status == {"open": 1, "in_progress": 0, "resolved": 0}


def test_tenant_dashboard(seeded, tenant_user):
    dashboard = views.compose_dashboard(tenant_user)

    assert isinstance(dashboard, TenantDashboard)
    assert dashboard.tenancy.full_name == "Tina Tenant"
    assert dashboard.tenancy.rooms.room_number == "101"
    assert dashboard.tenancy.rooms.properties.name == "A"
    assert [t.title for t in dashboard.tickets] == ["Leaky tap"]


def test_unassigned_tenant_dashboard(seeded, fake_db):
    newcomer = CurrentUser(id="profile-new", email="new@example.com", role="tenant")

    dashboard = views.compose_dashboard(newcomer)

    assert dashboard.tenancy is None
    assert dashboard.tickets == []


def test_public_authority_dashboard_has_no_personal_data(seeded, authority_user):
    dashboard = views.compose_dashboard(authority_user)

    assert isinstance(dashboard, PublicAuthorityDashboard)
    assert dashboard.stats.locations == ["Y", "X"]
    assert [p.name for p in dashboard.properties] == ["B", "A"]

    keys = all_keys(dashboard.model_dump(mode="json"))
    assert not keys & TENANT_PERSONAL_FIELDS
    assert not keys & {"full_name", "identification_number", "date_of_birth"}


def test_compose_dashboard_rejects_unknown_role(seeded):
    stranger = CurrentUser(id="x", email="x@example.com", role="landlord")

    with pytest.raises(NotAuthorized):
        views.compose_dashboard(stranger)


def test_search_inventory_projection(seeded, authority_user):
    results = views.search_inventory(PropertyFilters(room_type="double"), authority_user)

    assert [p.name for p in results] == ["B"]
    assert results[0].total_rooms == 1
    assert results[0].available_rooms == 1


def test_search_inventory_denied_for_tenant(seeded, tenant_user):
    with pytest.raises(NotAuthorized):
        views.search_inventory(PropertyFilters(), tenant_user)


def test_inventory_stats_empty():
    stats = views.inventory_stats([])
    assert stats.total_rooms == 0
    assert stats.occupancy_rate == 0
