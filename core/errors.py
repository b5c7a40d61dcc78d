# core/errors.py

from core.logging_config import logger


# ============================================================
# Application error taxonomy
# ============================================================
class AppError(Exception):
    """
    Base class for every error a core operation raises on purpose.
    `status_code` is the HTTP status the API answers with; the message
    is shown to the caller unchanged.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message, "error": type(self).__name__}


class ValidationError(AppError):
    """Missing or malformed required field, caught before any write."""

    status_code = 400


class NotAuthorized(AppError):
    """Role or ownership check failed."""

    status_code = 403


class NotFound(AppError):
    status_code = 404


class RoomNotFound(NotFound):
    def __init__(self, room_id: str):
        super().__init__(f"Room {room_id} not found")
        self.room_id = room_id


class RoomUnavailable(AppError):
    """The room already has an active tenant."""

    status_code = 409

    def __init__(self, room_id: str):
        super().__init__(f"Room {room_id} is already occupied")
        self.room_id = room_id


class GatewayError(AppError):
    """Transport or backend failure. The backend message is kept verbatim."""

    status_code = 502

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.operation = operation


# ============================================================
# Supabase error helpers
# ============================================================
def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors (APIError carries .message)
      • GoTrue (Auth) errors
      • Generic Python exceptions
    """

    # Case 1: PostgREST / GoTrue errors
    message = getattr(error, "message", None)
    if message:
        return str(message)

    # Case 2: errors with args (common)
    if getattr(error, "args", None):
        return str(error.args[0])

    # Case 3: Plain string fallback
    return str(error) or "Unknown Supabase error"


def supabase_error(error: Exception, operation: str = "Supabase error"):
    """
    Convert a Supabase client exception into a GatewayError.
    Always raises. The backend message is passed through verbatim.
    """
    detail = extract_supabase_error(error)
    logger.error(f"{operation}: {detail}")
    raise GatewayError(detail, operation=operation) from error
