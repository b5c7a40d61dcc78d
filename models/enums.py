from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]

    @classmethod
    def parse(cls, value):
        """Return the member for `value`, or None when unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return None


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    admin = "admin"
    tenant = "tenant"
    public_authority = "public_authority"


# -----------------------------------------------------
# ROOM TYPE
# -----------------------------------------------------
class RoomType(BaseStrEnum):
    single = "single"
    double = "double"
    family = "family"


# -----------------------------------------------------
# MAINTENANCE STATUS
# -----------------------------------------------------
class MaintenanceStatus(BaseStrEnum):
    """Workflow state for a maintenance ticket. No terminal state."""

    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
