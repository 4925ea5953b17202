"""Error taxonomy for roster operations.

Every error carries the HTTP status the web layer answers with.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base class for all roster errors."""

    http_status: int = 500


class InvalidKey(RosterError):
    """Identifier is not a syntactically valid store key."""

    http_status = 400

    def __init__(self, entity: str, value: object):
        self.entity = entity
        self.value = value
        super().__init__(f"Invalid {entity} ID format: {value}")


class NotFound(RosterError):
    """Referenced or target record does not exist."""

    http_status = 404

    def __init__(self, entity: str, value: object):
        self.entity = entity
        self.value = value
        super().__init__(f"{entity.capitalize()} with ID {value} not found")


class Conflict(RosterError):
    """Unique field value already held by another record."""

    http_status = 409

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Another record with {field} '{value}' already exists")


class ValidationError(RosterError):
    """Required field missing or malformed."""

    http_status = 400

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(", ".join(errors))


class StoreUnavailable(RosterError):
    """Underlying persistence failure."""

    http_status = 503

    def __init__(self, message: str):
        super().__init__(f"Store unavailable: {message}")
