"""Custom exceptions for BotCafe request handling."""


class BotCafeError(Exception):
    """Base error; rendered as ``{message}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str = None):
        super().__init__(message or 'Internal server error')

    @property
    def message(self) -> str:
        return str(self)


class BadRequest(BotCafeError):
    """Missing or invalid identifier or field."""

    status_code = 400


class Unauthorized(BotCafeError):
    """No authenticated caller."""

    status_code = 401

    def __init__(self, message: str = None):
        super().__init__(message or 'Unauthorized')


class Forbidden(BotCafeError):
    """Caller is authenticated but lacks the required permission."""

    status_code = 403


class NotFound(BotCafeError):
    """User not yet synced into the store, or target record absent."""

    status_code = 404


class Conflict(BotCafeError):
    """Record would duplicate a unique value."""

    status_code = 409


class StoreError(BotCafeError):
    """Document store operation failed."""

    def __init__(self, message: str, collection: str = None):
        self.collection = collection
        super().__init__(message)
