# tests/test_maintenance.py

"""
Tests for the maintenance ticket lifecycle.
"""

import pytest

from core.errors import NotAuthorized, NotFound, RoomNotFound
from models.enums import MaintenanceStatus
from models.maintenance import TicketCreate
from services import maintenance
from tests.fakes import assert_ticket_property_invariant


def test_admin_creates_ticket_with_derived_property(seeded, fake_db, admin_user):
    payload = TicketCreate(
        title="Broken heater",
        description="No heat since Monday",
        room_id=seeded["r201"]["id"],
        assigned_vendor="Acme Heating",
    )

    ticket = maintenance.create_ticket(payload, admin_user)

    assert ticket["property_id"] == seeded["prop_b"]["id"]
    assert ticket["status"] == "open"
    assert ticket["reported_by"] == admin_user.id
    assert ticket["assigned_vendor"] == "Acme Heating"
    assert ticket["rooms"]["room_number"] == "201"
    assert ticket["rooms"]["properties"]["name"] == "B"
    assert_ticket_property_invariant(fake_db)


def test_ticket_create_has_no_property_field():
    """property_id cannot be supplied by the caller."""
    with pytest.raises(ValueError):
        TicketCreate(title="t", description="d", room_id="r", property_id="spoofed")


def test_tenant_reports_on_own_room(seeded, fake_db, tenant_user):
    payload = TicketCreate(
        title="Mould",
        description="Bathroom ceiling",
        room_id=seeded["r101"]["id"],
        assigned_vendor="My cousin",
    )

    ticket = maintenance.create_ticket(payload, tenant_user)

    assert ticket["reported_by"] == tenant_user.id
    assert ticket["property_id"] == seeded["prop_a"]["id"]
    assert ticket["assigned_vendor"] is None


def test_tenant_cannot_report_on_other_room(seeded, fake_db, tenant_user):
    payload = TicketCreate(title="Noise", description="Next door", room_id=seeded["r102"]["id"])

    with pytest.raises(NotAuthorized):
        maintenance.create_ticket(payload, tenant_user)

    assert fake_db.writes_to("maintenance_logs", "insert") == []


def test_former_tenant_cannot_report(seeded, fake_db, tenant_user):
    fake_db.row("tenants", seeded["tina"]["id"])["is_active"] = False
    payload = TicketCreate(title="Leak", description="Still leaking", room_id=seeded["r101"]["id"])

    with pytest.raises(NotAuthorized):
        maintenance.create_ticket(payload, tenant_user)


def test_public_authority_cannot_report(seeded, authority_user):
    payload = TicketCreate(title="Leak", description="d", room_id=seeded["r101"]["id"])

    with pytest.raises(NotAuthorized):
        maintenance.create_ticket(payload, authority_user)


def test_create_ticket_unknown_room(seeded, admin_user):
    with pytest.raises(RoomNotFound):
        maintenance.create_ticket(TicketCreate(title="t", description="d", room_id="nope"), admin_user)


def test_tenant_unknown_room_is_not_authorized(seeded, fake_db, tenant_user):
    """Tenants see the same error for a missing room as for someone else's."""
    with pytest.raises(NotAuthorized):
        maintenance.create_ticket(TicketCreate(title="t", description="d", room_id="nope"), tenant_user)

    assert fake_db.writes_to("maintenance_logs", "insert") == []


# ------------------------------------------------------------------
# Status transitions
# ------------------------------------------------------------------
def test_update_status(seeded, fake_db, admin_user):
    ticket_id = seeded["ticket"]["id"]

    ticket = maintenance.update_ticket_status(ticket_id, MaintenanceStatus.in_progress, admin_user)

    assert ticket["status"] == "in_progress"
    assert fake_db.row("maintenance_logs", ticket_id)["status"] == "in_progress"


def test_update_status_twice_writes_once(seeded, fake_db, admin_user):
    ticket_id = seeded["ticket"]["id"]

    first = maintenance.update_ticket_status(ticket_id, "resolved", admin_user)
    second = maintenance.update_ticket_status(ticket_id, "resolved", admin_user)

    assert first["status"] == second["status"] == "resolved"
    assert len(fake_db.writes_to("maintenance_logs", "update")) == 1


def test_resolved_ticket_can_be_reopened(seeded, admin_user):
    ticket_id = seeded["ticket"]["id"]
    maintenance.update_ticket_status(ticket_id, "resolved", admin_user)

    ticket = maintenance.update_ticket_status(ticket_id, "open", admin_user)

    assert ticket["status"] == "open"


@pytest.mark.parametrize("user_fixture", ["tenant_user", "authority_user"])
def test_update_status_requires_admin(seeded, fake_db, request, user_fixture):
    user = request.getfixturevalue(user_fixture)

    with pytest.raises(NotAuthorized):
        maintenance.update_ticket_status(seeded["ticket"]["id"], "resolved", user)

    assert fake_db.writes == []


def test_update_status_unknown_ticket(seeded, admin_user):
    with pytest.raises(NotFound):
        maintenance.update_ticket_status("missing", "resolved", admin_user)


# ------------------------------------------------------------------
# Listing
# ------------------------------------------------------------------
def test_list_tickets_for_room_newest_first(seeded, fake_db, admin_user):
    room_id = seeded["r101"]["id"]
    newer = fake_db.add("maintenance_logs", title="Door", description="Sticks", room_id=room_id,
                        property_id=seeded["prop_a"]["id"], reported_by=admin_user.id)

    tickets = maintenance.list_tickets_for_room(room_id, admin_user)

    assert [t["id"] for t in tickets] == [newer["id"], seeded["ticket"]["id"]]


def test_tenant_lists_own_room_only(seeded, tenant_user):
    own = maintenance.list_tickets_for_room(seeded["r101"]["id"], tenant_user)
    assert [t["title"] for t in own] == ["Leaky tap"]

    with pytest.raises(NotAuthorized):
        maintenance.list_tickets_for_room(seeded["r201"]["id"], tenant_user)


def test_public_authority_cannot_list_tickets(seeded, authority_user):
    with pytest.raises(NotAuthorized):
        maintenance.list_tickets_for_room(seeded["r101"]["id"], authority_user)
    with pytest.raises(NotAuthorized):
        maintenance.list_tickets(authority_user)
