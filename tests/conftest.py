# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
from typing import Generator

from main import create_app
from dependencies.auth import CurrentUser, get_current_user, get_optional_auth
from tests.fakes import FakeSupabase


@pytest.fixture
def fake_db() -> Generator[FakeSupabase, None, None]:
    """In-memory Supabase wired into every gateway helper."""
    db = FakeSupabase()
    with patch("core.supabase_helpers.get_supabase_client", return_value=db), \
            patch("dependencies.auth.get_supabase_client", return_value=db):
        yield db


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login(app):
    """Authenticate subsequent requests as the given user (None = signed out)."""

    def _login(user):
        app.dependency_overrides[get_optional_auth] = lambda: user
        if user is not None:
            app.dependency_overrides[get_current_user] = lambda: user
        else:
            app.dependency_overrides.pop(get_current_user, None)

    yield _login
    app.dependency_overrides = {}


# ------------------------------------------------------------------
# Identities
# ------------------------------------------------------------------
@pytest.fixture
def admin_user():
    return CurrentUser(id="admin-1", email="admin@example.com", role="admin", full_name="Ada Admin")


@pytest.fixture
def tenant_user():
    return CurrentUser(id="profile-t1", email="tina@example.com", role="tenant", full_name="Tina Tenant")


@pytest.fixture
def authority_user():
    return CurrentUser(id="authority-1", email="audit@city.gov", role="public_authority")


# ------------------------------------------------------------------
# Seed data
# ------------------------------------------------------------------
@pytest.fixture
def seeded(fake_db, tenant_user):
    """
    Two properties:
      A (X): room 101 single 400 (occupied by Tina), room 102 single 450
      B (Y): room 201 double 900
    plus one open ticket on room 101.
    """
    fake_db.add("profiles", id=tenant_user.id, email=tenant_user.email,
                full_name="Tina Tenant", role="tenant")

    prop_a = fake_db.add("properties", name="A", location="X", description="Riverside", created_by="admin-1")
    prop_b = fake_db.add("properties", name="B", location="Y", created_by="admin-1")

    r101 = fake_db.add("rooms", property_id=prop_a["id"], room_number="101",
                       room_type="single", price=400, is_occupied=True)
    r102 = fake_db.add("rooms", property_id=prop_a["id"], room_number="102",
                       room_type="single", price=450)
    r201 = fake_db.add("rooms", property_id=prop_b["id"], room_number="201",
                       room_type="double", price=900)

    tina = fake_db.add("tenants", full_name="Tina Tenant", room_id=r101["id"],
                       profile_id=tenant_user.id, identification_number="ID-555",
                       date_of_birth="1990-04-01", move_in_date="2024-01-05", is_active=True)

    ticket = fake_db.add("maintenance_logs", title="Leaky tap", description="Kitchen tap drips",
                         room_id=r101["id"], property_id=prop_a["id"], reported_by=tenant_user.id)

    return {
        "prop_a": prop_a, "prop_b": prop_b,
        "r101": r101, "r102": r102, "r201": r201,
        "tina": tina, "ticket": ticket,
    }

