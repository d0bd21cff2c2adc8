"""
Domain exceptions for reservations, spaces and clubs.

Each error carries the HTTP status the API layer answers with and a
human-readable detail. ValidationError and MalformedRecordError are also
ValueErrors, NotFoundError is also a LookupError, so callers written
against the builtin types keep working.
"""


class ClubSpaceError(Exception):
    """Base class for portal domain errors."""

    status_code: int = 400
    detail: str = "Request could not be processed"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class ValidationError(ClubSpaceError, ValueError):
    """Raised when required input is missing or invalid."""

    status_code = 400
    detail = "Invalid input"

    def __init__(self, detail: str | None = None, fields: list | None = None) -> None:
        super().__init__(detail)
        self.fields = fields or []


class NotFoundError(ClubSpaceError, LookupError):
    """Raised when an operation targets an id that does not exist."""

    status_code = 404
    detail = "Not found"


class ConflictError(ClubSpaceError):
    """Raised when an operation conflicts with stored data."""

    status_code = 409
    detail = "Conflict"


class MalformedRecordError(ClubSpaceError, ValueError):
    """Raised when a stored record cannot be read as a valid reservation."""

    status_code = 422
    detail = "Malformed reservation record"

    def __init__(self, detail: str | None = None, record_id=None) -> None:
        super().__init__(detail)
        self.record_id = record_id
