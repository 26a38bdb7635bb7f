"""Custom exception classes for the application.

Every request-level failure maps to exactly one of these kinds. The
``code`` attribute is what the API returns so clients (and operators
reading logs) can tell a database outage from an image vendor outage.
"""


class PixSearchException(Exception):
    """Base exception for all PixSearch errors."""

    code = "internal_error"
    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(PixSearchException):
    """Raised when request input is malformed or empty."""

    code = "validation_error"
    status_code = 400


class AuthorizationError(PixSearchException):
    """Raised when an identity is required but absent or unresolvable."""

    code = "authorization_error"
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class PersistenceError(PixSearchException):
    """Raised when the event store is unreachable or rejects a read/write."""

    code = "persistence_error"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Event store {operation} failed")


class ProviderError(PixSearchException):
    """Raised when the external image provider fails, times out or rejects us."""

    code = "provider_error"

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"Image provider error for {provider}: {message}")
