# models/common.py

from uuid import UUID


def not_blank(v):
    """Strip strings and reject blank values for required text fields."""
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
    return v


def blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


def normalize_id(v):
    """UUID → str always."""
    if isinstance(v, UUID):
        return str(v)
    return v


def normalize_timestamp(v):
    # Parse trailing Z timestamps
    if isinstance(v, str) and v.endswith("Z"):
        return v.replace("Z", "+00:00")
    return v
