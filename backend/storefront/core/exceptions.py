"""
Application exceptions.

Services raise these; the API layer maps each class to an HTTP status
code and the JSON error envelope (see ``storefront.api.errors``).

    StorefrontError
    ├── ValidationError
    ├── ConflictError
    │   └── EmailInUseError
    ├── AuthenticationError
    │   ├── AuthenticationRequiredError
    │   └── InvalidTokenError
    ├── NotFoundError
    │   └── UserNotFoundError
    ├── InvalidCredentialError
    └── InternalError
"""

from typing import Optional


class StorefrontError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error description, safe to return to clients
        details: Additional context for logs
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StorefrontError):
    """Request data has the wrong shape or refers to unknown records."""
    pass


class ConflictError(StorefrontError):
    """Write would violate a uniqueness rule."""
    pass


class EmailInUseError(ConflictError):

    def __init__(self, email: str):
        super().__init__(
            message="Email is already in use",
            details={"email": email},
        )


class AuthenticationError(StorefrontError):
    pass


class AuthenticationRequiredError(AuthenticationError):
    """No token was sent with a request to a protected route."""

    def __init__(self):
        super().__init__(message="Token not provided")


class InvalidTokenError(AuthenticationError):
    """Token failed verification or carries no usable user id."""

    def __init__(self, reason: str = "verification failed"):
        super().__init__(
            message="Failed to authenticate token",
            details={"reason": reason},
        )


class NotFoundError(StorefrontError):
    pass


class UserNotFoundError(NotFoundError):

    def __init__(self, **lookup):
        super().__init__(message="User not found", details=lookup)


class InvalidCredentialError(StorefrontError):

    def __init__(self):
        super().__init__(message="Invalid password")


class InternalError(StorefrontError):
    """Storage failure or anything else the client cannot fix."""
    pass
