# tests/test_filters.py

"""
Tests for search and multi-criteria filtering.
"""

import pytest

from models.filters import PropertyFilters, TenantFilters, TicketFilters
from services.filters import (
    filter_properties,
    filter_tenants,
    filter_tickets,
    parse_price_range,
    unique_locations,
)


PROPERTIES = [
    {"name": "A", "location": "X", "rooms": [{"room_type": "single", "price": 400}]},
    {"name": "B", "location": "Y", "rooms": [{"room_type": "double", "price": 900}]},
]

TICKETS = [
    {"title": "Leaky tap", "description": "Kitchen", "status": "open", "rooms": {"room_number": "101"}},
    {"title": "Heater", "description": "Cold radiator", "status": "in_progress", "rooms": {"room_number": "201"}},
    {"title": "Door", "description": "Sticks in damp weather", "status": "resolved", "rooms": {"room_number": "102"}},
]


def names(rows):
    return [r["name"] for r in rows]


def test_room_type_filter_matches_property_with_such_room():
    assert names(filter_properties(PROPERTIES, PropertyFilters(room_type="single"))) == ["A"]


def test_price_range_filter():
    assert names(filter_properties(PROPERTIES, PropertyFilters(price_range="500-1000"))) == ["B"]


def test_open_ended_price_range():
    assert names(filter_properties(PROPERTIES, PropertyFilters(price_range="450-"))) == ["B"]
    assert names(filter_properties(PROPERTIES, PropertyFilters(price_range="0-"))) == ["A", "B"]


def test_room_criteria_must_hold_on_the_same_room():
    mixed = [{
        "name": "C",
        "location": "Z",
        "rooms": [
            {"room_type": "single", "price": 1200},
            {"room_type": "family", "price": 300},
        ],
    }]

    assert filter_properties(mixed, PropertyFilters(room_type="single", price_range="0-500")) == []
    assert names(filter_properties(mixed, PropertyFilters(room_type="family", price_range="0-500"))) == ["C"]


def test_nested_rooms_are_not_filtered():
    prop = {"name": "C", "location": "Z", "rooms": [
        {"room_type": "single", "price": 100},
        {"room_type": "double", "price": 200},
    ]}

    [result] = filter_properties([prop], PropertyFilters(room_type="single"))

    assert len(result["rooms"]) == 2


def test_property_without_rooms_fails_room_criteria():
    bare = [{"name": "Empty", "location": "X", "rooms": []}]
    assert filter_properties(bare, PropertyFilters(room_type="single")) == []
    assert names(filter_properties(bare, PropertyFilters())) == ["Empty"]


def test_location_and_search_combine():
    assert names(filter_properties(PROPERTIES, PropertyFilters(location="Y"))) == ["B"]
    assert names(filter_properties(PROPERTIES, PropertyFilters(search="x"))) == ["A"]
    assert filter_properties(PROPERTIES, PropertyFilters(search="a", location="Y")) == []


@pytest.mark.parametrize("filters", [
    PropertyFilters(room_type="penthouse"),
    PropertyFilters(price_range="cheap"),
    PropertyFilters(price_range=""),
    PropertyFilters(location=""),
    PropertyFilters(room_type=None, price_range=None, location=None, search=None),
])
def test_unrecognised_values_do_not_restrict(filters):
    assert names(filter_properties(PROPERTIES, filters)) == ["A", "B"]


def test_parse_price_range():
    assert parse_price_range("all") is None
    assert parse_price_range("500-1000").model_dump() == {"min": 500.0, "max": 1000.0}
    assert parse_price_range("1500-").max is None
    assert parse_price_range("1000-500") is None
    assert parse_price_range("abc-def") is None


def test_ticket_text_search_is_case_insensitive():
    assert [t["title"] for t in filter_tickets(TICKETS, TicketFilters(search="KITCHEN"))] == ["Leaky tap"]
    assert [t["title"] for t in filter_tickets(TICKETS, TicketFilters(search="201"))] == ["Heater"]


def test_ticket_status_filter():
    assert [t["title"] for t in filter_tickets(TICKETS, TicketFilters(status="resolved"))] == ["Door"]
    assert len(filter_tickets(TICKETS, TicketFilters(status="all"))) == 3
    assert len(filter_tickets(TICKETS, TicketFilters(status="closed"))) == 3


def test_ticket_filters_preserve_order():
    result = filter_tickets(TICKETS, TicketFilters(search="e"))
    assert [t["title"] for t in result] == ["Leaky tap", "Heater", "Door"]


def test_tenant_search_matches_name_or_room():
    tenants = [
        {"full_name": "Tina Tenant", "rooms": {"room_number": "101"}},
        {"full_name": "Sam Sharer", "rooms": None},
    ]
    assert [t["full_name"] for t in filter_tenants(tenants, TenantFilters(search="sam"))] == ["Sam Sharer"]
    assert [t["full_name"] for t in filter_tenants(tenants, TenantFilters(search="101"))] == ["Tina Tenant"]


def test_unique_locations_keep_first_seen_order():
    rows = [{"location": "Y"}, {"location": "X"}, {"location": "Y"}]
    assert unique_locations(rows) == ["Y", "X"]
