# services/filters.py

"""
Search and multi-criteria filtering over rows already fetched and
scoped by role.

Every function is a stable filter: the result keeps the input order,
so the fetch order (newest first, or room_number for rooms) survives.
All active predicates are ANDed; empty, "all" or unrecognised values
impose no restriction.
"""

from typing import Iterable, List, Optional

from models.enums import MaintenanceStatus, RoomType
from models.filters import (
    ALL,
    PriceRange,
    PropertyFilters,
    TenantFilters,
    TicketFilters,
)


# Human-readable fields searched per entity. Dotted paths reach into
# embedded relations ("rooms.room_number").
TICKET_SEARCH_FIELDS = ("title", "description", "rooms.room_number")
PROPERTY_SEARCH_FIELDS = ("name", "location")
TENANT_SEARCH_FIELDS = ("full_name", "rooms.room_number")


def _lookup(row: dict, path: str):
    value = row
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def matches_text(row: dict, term: Optional[str], fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of `fields`."""
    if not term or not term.strip():
        return True

    needle = term.strip().lower()
    for field in fields:
        value = _lookup(row, field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def _is_restriction(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


# -----------------------------------------------------
# Price range: "all" | "<min>-<max>" | "<min>-"
# -----------------------------------------------------
def parse_price_range(value: Optional[str]) -> Optional[PriceRange]:
    """
    Returns None for "all", empty, or anything unparseable.
    A missing or zero upper bound means "no upper bound".
    """
    if not _is_restriction(value):
        return None

    lower, sep, upper = value.partition("-")
    if not sep:
        return None

    try:
        low = float(lower) if lower.strip() else 0.0
        high = float(upper) if upper.strip() else None
    except ValueError:
        return None

    if not high:
        high = None
    if high is not None and high < low:
        return None

    return PriceRange(min=low, max=high)


# -----------------------------------------------------
# Tickets
# -----------------------------------------------------
def filter_tickets(rows: List[dict], filters: TicketFilters) -> List[dict]:
    status = MaintenanceStatus.parse(filters.status) if _is_restriction(filters.status) else None

    return [
        row for row in rows
        if matches_text(row, filters.search, TICKET_SEARCH_FIELDS)
        and (status is None or row.get("status") == status.value)
    ]


# -----------------------------------------------------
# Tenants
# -----------------------------------------------------
def filter_tenants(rows: List[dict], filters: TenantFilters) -> List[dict]:
    return [
        row for row in rows
        if matches_text(row, filters.search, TENANT_SEARCH_FIELDS)
    ]


# -----------------------------------------------------
# Properties (with embedded rooms)
# -----------------------------------------------------
def room_matches(room: dict, room_type: Optional[RoomType], price: Optional[PriceRange]) -> bool:
    if room_type is not None and room.get("room_type") != room_type.value:
        return False
    if price is not None and not price.contains(room.get("price")):
        return False
    return True


def filter_properties(rows: List[dict], filters: PropertyFilters) -> List[dict]:
    """
    Room-level criteria (type, price) match a property when at least
    one of its rooms satisfies all of them. The nested room list is
    returned untouched.
    """
    location = filters.location if _is_restriction(filters.location) else None
    room_type = RoomType.parse(filters.room_type) if _is_restriction(filters.room_type) else None
    price = parse_price_range(filters.price_range)
    check_rooms = room_type is not None or price is not None

    result = []
    for row in rows:
        if not matches_text(row, filters.search, PROPERTY_SEARCH_FIELDS):
            continue
        if location is not None and row.get("location") != location:
            continue
        if check_rooms and not any(
            room_matches(room, room_type, price) for room in row.get("rooms") or []
        ):
            continue
        result.append(row)

    return result


def unique_locations(rows: List[dict]) -> List[str]:
    """Distinct property locations in first-seen order."""
    seen = []
    for row in rows:
        location = row.get("location")
        if location and location not in seen:
            seen.append(location)
    return seen
